"""
Record Audit Event Use Case

The write surface offered to the rest of the application.
"""

from libs.result import Error, Result, Return
from audit_service.app.services.unit_of_work import UnitOfWork
from audit_service.domain.dtos import AuditLogCreate
from audit_service.domain.errors import AuditServiceError
from .dtos import AuditLogResponse


class RecordAuditEventUseCase:
    """
    Use case for appending an event to the audit log.

    Business Rules:
    - timestamp is assigned by the store, never by the caller
    - ip_address / user_agent default to "unknown", metadata to {}
    - success defaults to True
    - user_id must be a valid UUID when present
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, data: AuditLogCreate) -> Result[AuditLogResponse]:
        async with self.uow:
            try:
                audit_log = await self.uow.audit_logs.create(data)
                await self.uow.commit()
            except AuditServiceError as exc:
                return Return.err(Error(exc.code, exc.message))

            return Return.ok(AuditLogResponse.from_entity(audit_log))
