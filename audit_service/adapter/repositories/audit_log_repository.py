import logging
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID

from sqlalchemy import case, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from audit_service.app.repositories.audit_log_repository import (
    DEFAULT_RETENTION_DAYS,
    IAuditLogRepository,
)
from audit_service.domain.base import to_naive_utc, utc_ago, utcnow
from audit_service.domain.dtos import (
    AuditLogCreate,
    AuditLogFilters,
    AuditStats,
    AuditStatsFilters,
    SecurityEventsOptions,
)
from audit_service.domain.entities import (
    SECURITY_EVENT_TYPES,
    UNKNOWN,
    AuditEventType,
    AuditLog,
)
from audit_service.domain.errors import StoreUnavailable, ValidationError

logger = logging.getLogger(__name__)

FAILED_LOGIN_WINDOW_HOURS = 24


@contextmanager
def _store_errors(operation: str):
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"Audit store {operation} failed: {exc}")
        raise StoreUnavailable(f"Audit store {operation} failed") from exc


def _parse_user_id(value: Optional[Union[UUID, str]]) -> Optional[UUID]:
    if value is None or value == "":
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid user id: {value!r}") from None


def _check_date_range(start_date: Optional[datetime], end_date: Optional[datetime]):
    if start_date and end_date and start_date > end_date:
        raise ValidationError("start_date must not be after end_date")


def _check_limit(limit: int, name: str = "limit"):
    if limit < 1:
        raise ValidationError(f"{name} must be a positive integer")


class AuditLogRepository(IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, data: AuditLogCreate) -> AuditLog:
        """Create a new audit log entry (immutable)"""
        audit_log = AuditLog(
            event_type=AuditEventType(data.event_type).value,
            user_id=_parse_user_id(data.user_id),
            ip_address=data.ip_address or UNKNOWN,
            user_agent=data.user_agent or UNKNOWN,
            event_metadata=data.metadata or {},
            resource=data.resource,
            action=data.action,
            success=True if data.success is None else data.success,
            timestamp=utcnow(),
        )

        with _store_errors("insert"):
            self.session.add(audit_log)
            await self.session.flush()
            await self.session.refresh(audit_log)
        return audit_log

    def _conditions(
        self,
        user_id: Optional[Union[UUID, str]] = None,
        event_type: Optional[str] = None,
        ip_address: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list:
        """Build WHERE clauses; a missing filter adds no constraint"""
        start_date = to_naive_utc(start_date)
        end_date = to_naive_utc(end_date)
        _check_date_range(start_date, end_date)

        conditions = []
        parsed_user_id = _parse_user_id(user_id)
        if parsed_user_id is not None:
            conditions.append(AuditLog.user_id == parsed_user_id)
        if event_type:
            conditions.append(AuditLog.event_type == event_type)
        if ip_address:
            conditions.append(AuditLog.ip_address == ip_address)
        if start_date:
            conditions.append(col(AuditLog.timestamp) >= start_date)
        if end_date:
            conditions.append(col(AuditLog.timestamp) <= end_date)
        return conditions

    async def find(self, filters: Optional[AuditLogFilters] = None) -> List[AuditLog]:
        """Find audit logs, newest first"""
        filters = filters or AuditLogFilters()
        _check_limit(filters.limit)
        if filters.skip < 0:
            raise ValidationError("skip must not be negative")

        conditions = self._conditions(
            user_id=filters.user_id,
            event_type=filters.event_type,
            ip_address=filters.ip_address,
            start_date=filters.start_date,
            end_date=filters.end_date,
        )

        stmt = select(AuditLog)
        if conditions:
            stmt = stmt.where(*conditions)
        stmt = (
            stmt.order_by(col(AuditLog.timestamp).desc())
            .offset(filters.skip)
            .limit(filters.limit)
        )

        with _store_errors("find"):
            result = await self.session.exec(stmt)
            return list(result.all())

    async def get_stats(self, filters: Optional[AuditStatsFilters] = None) -> AuditStats:
        """
        Aggregate statistics for matching events.

        The three reads are independent; they share one session, which does not
        allow concurrent statements, so they run back to back.
        """
        filters = filters or AuditStatsFilters()
        conditions = self._conditions(
            user_id=filters.user_id,
            start_date=filters.start_date,
            end_date=filters.end_date,
        )

        count_stmt = select(func.count(col(AuditLog.id)))
        count_column = func.count(col(AuditLog.id)).label("count")
        by_type_stmt = select(AuditLog.event_type, count_column).group_by(
            AuditLog.event_type
        )
        success_stmt = select(
            func.count(col(AuditLog.id)),
            func.sum(case((col(AuditLog.success) == True, 1), else_=0)),
        )
        if conditions:
            count_stmt = count_stmt.where(*conditions)
            by_type_stmt = by_type_stmt.where(*conditions)
            success_stmt = success_stmt.where(*conditions)
        by_type_stmt = by_type_stmt.order_by(count_column.desc(), AuditLog.event_type)

        with _store_errors("stats"):
            total_logs = (await self.session.exec(count_stmt)).one()
            by_type = (await self.session.exec(by_type_stmt)).all()
            total, successful = (await self.session.exec(success_stmt)).one()

        success_rate = (successful or 0) / total * 100 if total else 0.0

        return AuditStats(
            total_logs=total_logs,
            event_type_counts={event_type: count for event_type, count in by_type},
            success_rate=success_rate,
        )

    async def get_recent_security_events(
        self, options: Optional[SecurityEventsOptions] = None
    ) -> List[AuditLog]:
        """Most recent security-relevant events, newest first"""
        options = options or SecurityEventsOptions()
        _check_limit(options.limit)

        conditions = self._conditions(
            start_date=options.start_date, end_date=options.end_date
        )
        conditions.append(
            col(AuditLog.event_type).in_([t.value for t in SECURITY_EVENT_TYPES])
        )

        stmt = (
            select(AuditLog)
            .where(*conditions)
            .order_by(col(AuditLog.timestamp).desc())
            .limit(options.limit)
        )

        with _store_errors("security events"):
            result = await self.session.exec(stmt)
            return list(result.all())

    async def get_failed_login_attempts(
        self, ip_address: str, since: Optional[datetime] = None
    ) -> int:
        """Count failed login attempts from an IP address since a point in time"""
        since = to_naive_utc(since) if since else utc_ago(hours=FAILED_LOGIN_WINDOW_HOURS)

        stmt = select(func.count(col(AuditLog.id))).where(
            AuditLog.event_type == AuditEventType.login_failed.value,
            AuditLog.ip_address == ip_address,
            col(AuditLog.timestamp) >= since,
        )

        with _store_errors("failed login count"):
            return (await self.session.exec(stmt)).one()

    async def cleanup_old_logs(self, days: int = DEFAULT_RETENTION_DAYS) -> int:
        """Delete audit logs older than the retention window"""
        if days < 0:
            raise ValidationError("days must not be negative")

        cutoff = utc_ago(days=days)
        stmt = delete(AuditLog).where(col(AuditLog.timestamp) < cutoff)

        with _store_errors("cleanup"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount
