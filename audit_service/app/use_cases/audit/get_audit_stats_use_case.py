"""
Get Audit Stats Use Case
"""

from typing import Optional

from libs.result import Error, Result, Return
from audit_service.app.services.unit_of_work import UnitOfWork
from audit_service.domain.dtos import AuditStatsFilters
from audit_service.domain.errors import AuditServiceError
from .dtos import AuditStatsResponse


class GetAuditStatsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, filters: Optional[AuditStatsFilters] = None
    ) -> Result[AuditStatsResponse]:
        async with self.uow:
            try:
                stats = await self.uow.audit_logs.get_stats(
                    filters or AuditStatsFilters()
                )
            except AuditServiceError as exc:
                return Return.err(Error(exc.code, exc.message))

            return Return.ok(
                AuditStatsResponse(
                    total_logs=stats.total_logs,
                    event_type_counts=stats.event_type_counts,
                    success_rate=stats.success_rate,
                )
            )
