from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from audit_service.adapter.repositories.audit_log_repository import AuditLogRepository
from audit_service.app.services.unit_of_work import UnitOfWork
from audit_service.domain.errors import StoreUnavailable


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.audit_logs = AuditLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise StoreUnavailable("Audit store commit failed") from exc

    async def rollback(self):
        await self.session.rollback()
