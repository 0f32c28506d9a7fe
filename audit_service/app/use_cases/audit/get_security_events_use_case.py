"""
Get Security Events Use Case

Recent authentication and security incidents (login, lockout, CSRF, 2FA,
password changes).
"""

from typing import Optional

from libs.result import Error, Result, Return
from audit_service.app.services.unit_of_work import UnitOfWork
from audit_service.domain.dtos import SecurityEventsOptions
from audit_service.domain.errors import AuditServiceError
from .dtos import AuditLogResponse, SecurityEventsResponse


class GetSecurityEventsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, options: Optional[SecurityEventsOptions] = None
    ) -> Result[SecurityEventsResponse]:
        async with self.uow:
            try:
                events = await self.uow.audit_logs.get_recent_security_events(
                    options or SecurityEventsOptions()
                )
            except AuditServiceError as exc:
                return Return.err(Error(exc.code, exc.message))

            return Return.ok(
                SecurityEventsResponse(
                    events=[AuditLogResponse.from_entity(event) for event in events]
                )
            )
