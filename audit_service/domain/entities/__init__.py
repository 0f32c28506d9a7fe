"""
Audit Service Domain Entities
"""

from .enums import AuditEventType, SECURITY_EVENT_TYPES
from .audit_log import AuditLog, UNKNOWN

__all__ = [
    "AuditEventType",
    "SECURITY_EVENT_TYPES",
    "AuditLog",
    "UNKNOWN",
]
