import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.audit_logs = MagicMock()
    uow.audit_logs.create = AsyncMock()
    uow.audit_logs.find = AsyncMock(return_value=[])
    uow.audit_logs.get_stats = AsyncMock()
    uow.audit_logs.get_recent_security_events = AsyncMock(return_value=[])
    uow.audit_logs.get_failed_login_attempts = AsyncMock(return_value=0)
    uow.audit_logs.cleanup_old_logs = AsyncMock(return_value=0)
    return uow
