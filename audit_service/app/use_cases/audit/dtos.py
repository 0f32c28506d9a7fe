"""
Audit Use Case DTOs (Data Transfer Objects)

Response classes for the audit domain.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from audit_service.domain.entities import AuditLog


# ============================================================================
# Response DTOs
# ============================================================================


class AuditLogResponse(BaseModel):
    """Single audit log entry"""

    id: str
    event_type: str
    user_id: Optional[str]
    ip_address: str
    user_agent: str
    metadata: Dict[str, Any]
    resource: Optional[str]
    action: Optional[str]
    success: bool
    timestamp: str

    @classmethod
    def from_entity(cls, audit_log: AuditLog) -> "AuditLogResponse":
        return cls(
            id=str(audit_log.id),
            event_type=audit_log.event_type,
            user_id=str(audit_log.user_id) if audit_log.user_id else None,
            ip_address=audit_log.ip_address,
            user_agent=audit_log.user_agent,
            metadata=audit_log.event_metadata or {},
            resource=audit_log.resource,
            action=audit_log.action,
            success=audit_log.success,
            timestamp=audit_log.timestamp.isoformat() + "Z",
        )


class AuditLogListResponse(BaseModel):
    """Response for list audit logs use case"""

    logs: List[AuditLogResponse]


class SecurityEventsResponse(BaseModel):
    """Response for recent security events use case"""

    events: List[AuditLogResponse]


class AuditStatsResponse(BaseModel):
    """Response for audit statistics use case"""

    total_logs: int
    event_type_counts: Dict[str, int]
    success_rate: float


class CleanupAuditLogsResponse(BaseModel):
    """Response for retention cleanup use case"""

    deleted_count: int
    retention_days: int
