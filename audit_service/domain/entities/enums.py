"""
Audit Service Domain Enums
"""

from enum import Enum


class AuditEventType(str, Enum):
    """Type of an audited action"""

    # Authentication
    login_success = "login_success"
    login_failed = "login_failed"
    logout = "logout"
    password_changed = "password_changed"
    password_reset_requested = "password_reset_requested"
    password_reset_completed = "password_reset_completed"
    two_fa_enabled = "two_fa_enabled"
    two_fa_disabled = "two_fa_disabled"
    two_fa_code_sent = "two_fa_code_sent"
    two_fa_verified = "two_fa_verified"

    # Sessions
    session_created = "session_created"
    session_deleted = "session_deleted"
    all_sessions_deleted = "all_sessions_deleted"

    # Products
    product_created = "product_created"
    product_updated = "product_updated"
    product_deleted = "product_deleted"
    product_image_uploaded = "product_image_uploaded"

    # Orders
    order_status_changed = "order_status_changed"
    order_fulfilled = "order_fulfilled"
    shipment_created = "shipment_created"

    # Customers
    customer_updated = "customer_updated"

    # Messages
    message_status_changed = "message_status_changed"
    message_deleted = "message_deleted"
    message_email_sent = "message_email_sent"

    # Newsletter
    newsletter_sent = "newsletter_sent"
    newsletter_draft_created = "newsletter_draft_created"
    newsletter_draft_updated = "newsletter_draft_updated"
    newsletter_draft_deleted = "newsletter_draft_deleted"
    subscriber_deleted = "subscriber_deleted"

    # Security
    account_locked = "account_locked"
    suspicious_activity = "suspicious_activity"
    csrf_token_invalid = "csrf_token_invalid"


SECURITY_EVENT_TYPES = (
    AuditEventType.login_success,
    AuditEventType.login_failed,
    AuditEventType.logout,
    AuditEventType.account_locked,
    AuditEventType.suspicious_activity,
    AuditEventType.csrf_token_invalid,
    AuditEventType.two_fa_enabled,
    AuditEventType.two_fa_disabled,
    AuditEventType.password_changed,
    AuditEventType.password_reset_requested,
    AuditEventType.password_reset_completed,
)
