"""
Audit Service Domain Errors

Raised by the audit store; use cases turn them into Result errors.
"""


class AuditServiceError(Exception):
    """Base class for audit store failures"""

    code = "AUDIT_SERVICE_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AuditServiceError):
    """Malformed identifier or filter shape, rejected before any store call"""

    code = "VALIDATION_ERROR"


class StoreUnavailable(AuditServiceError):
    """Connection or query failure against the underlying database"""

    code = "STORE_UNAVAILABLE"
