from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from audit_service.domain.dtos import (
    AuditLogCreate,
    AuditLogFilters,
    AuditStats,
    AuditStatsFilters,
    SecurityEventsOptions,
)
from audit_service.domain.entities import AuditLog

DEFAULT_RETENTION_DAYS = 90


class IAuditLogRepository(ABC):
    """AuditLog repository interface - application layer"""

    @abstractmethod
    async def create(self, data: AuditLogCreate) -> AuditLog:
        """
        Record a new audit event (immutable).

        Fills timestamp server-side and applies defaults for omitted fields.

        Raises:
            ValidationError: user_id is not a valid identifier
            StoreUnavailable: the insert failed
        """
        pass

    @abstractmethod
    async def find(self, filters: Optional[AuditLogFilters] = None) -> List[AuditLog]:
        """Events matching the filters, newest first, paginated by limit/skip"""
        pass

    @abstractmethod
    async def get_stats(self, filters: Optional[AuditStatsFilters] = None) -> AuditStats:
        """Total count, per-type counts and success rate of matching events"""
        pass

    @abstractmethod
    async def get_recent_security_events(
        self, options: Optional[SecurityEventsOptions] = None
    ) -> List[AuditLog]:
        """Most recent events whose type is security-relevant, newest first"""
        pass

    @abstractmethod
    async def get_failed_login_attempts(
        self, ip_address: str, since: Optional[datetime] = None
    ) -> int:
        """Count failed logins from ip_address at or after since (default: last 24h)"""
        pass

    @abstractmethod
    async def cleanup_old_logs(self, days: int = DEFAULT_RETENTION_DAYS) -> int:
        """Delete events strictly older than now - days, return how many were removed"""
        pass
