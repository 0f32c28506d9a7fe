"""
Use Cases

Organized into domain folders:
- audit/: Audit log recording, queries and retention

Import from subdirectories for better organization.
"""

from .audit import (
    CleanupAuditLogsUseCase,
    GetAuditStatsUseCase,
    GetSecurityEventsUseCase,
    ListAuditLogsUseCase,
    RecordAuditEventUseCase,
)

__all__ = [
    "RecordAuditEventUseCase",
    "ListAuditLogsUseCase",
    "GetAuditStatsUseCase",
    "GetSecurityEventsUseCase",
    "CleanupAuditLogsUseCase",
]
