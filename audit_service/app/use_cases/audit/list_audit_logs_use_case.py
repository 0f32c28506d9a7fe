"""
List Audit Logs Use Case

Filtered, paginated view of the audit log for the admin dashboard.
"""

from typing import Optional

from libs.result import Error, Result, Return
from audit_service.app.services.unit_of_work import UnitOfWork
from audit_service.domain.dtos import AuditLogFilters
from audit_service.domain.errors import AuditServiceError
from .dtos import AuditLogListResponse, AuditLogResponse


class ListAuditLogsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, filters: Optional[AuditLogFilters] = None
    ) -> Result[AuditLogListResponse]:
        async with self.uow:
            try:
                logs = await self.uow.audit_logs.find(filters or AuditLogFilters())
            except AuditServiceError as exc:
                return Return.err(Error(exc.code, exc.message))

            return Return.ok(
                AuditLogListResponse(
                    logs=[AuditLogResponse.from_entity(log) for log in logs]
                )
            )
