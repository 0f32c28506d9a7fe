"""
Audit Use Cases

All audit-related business logic.
"""

from .cleanup_audit_logs_use_case import CleanupAuditLogsUseCase
from .dtos import (
    AuditLogListResponse,
    AuditLogResponse,
    AuditStatsResponse,
    CleanupAuditLogsResponse,
    SecurityEventsResponse,
)
from .get_audit_stats_use_case import GetAuditStatsUseCase
from .get_security_events_use_case import GetSecurityEventsUseCase
from .list_audit_logs_use_case import ListAuditLogsUseCase
from .record_audit_event_use_case import RecordAuditEventUseCase

__all__ = [
    # Use cases
    "RecordAuditEventUseCase",
    "ListAuditLogsUseCase",
    "GetAuditStatsUseCase",
    "GetSecurityEventsUseCase",
    "CleanupAuditLogsUseCase",
    # DTOs
    "AuditLogResponse",
    "AuditLogListResponse",
    "AuditStatsResponse",
    "SecurityEventsResponse",
    "CleanupAuditLogsResponse",
]
