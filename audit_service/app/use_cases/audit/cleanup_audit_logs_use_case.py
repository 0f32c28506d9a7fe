"""
Cleanup Audit Logs Use Case

Retention job: deletes audit logs older than the retention window.
Safe to re-run; a second run with no new old records deletes nothing.
"""

import logging

from libs.result import Error, Result, Return
from audit_service.app.repositories.audit_log_repository import DEFAULT_RETENTION_DAYS
from audit_service.app.services.unit_of_work import UnitOfWork
from audit_service.domain.errors import AuditServiceError
from .dtos import CleanupAuditLogsResponse

logger = logging.getLogger(__name__)


class CleanupAuditLogsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, days: int = DEFAULT_RETENTION_DAYS
    ) -> Result[CleanupAuditLogsResponse]:
        async with self.uow:
            try:
                deleted_count = await self.uow.audit_logs.cleanup_old_logs(days)
                await self.uow.commit()
            except AuditServiceError as exc:
                logger.error(f"Audit log cleanup failed: {exc.message}")
                return Return.err(Error(exc.code, exc.message))

            logger.info(f"Cleaned up {deleted_count} audit logs older than {days} days")
            return Return.ok(
                CleanupAuditLogsResponse(deleted_count=deleted_count, retention_days=days)
            )
