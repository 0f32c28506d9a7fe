from datetime import datetime
from uuid import uuid4

import pytest

from audit_service.app.use_cases.audit import (
    GetAuditStatsUseCase,
    GetSecurityEventsUseCase,
    ListAuditLogsUseCase,
)
from audit_service.domain.dtos import (
    AuditLogFilters,
    AuditStats,
    AuditStatsFilters,
    SecurityEventsOptions,
)
from audit_service.domain.entities import AuditEventType, AuditLog
from audit_service.domain.errors import StoreUnavailable, ValidationError


def make_log(event_type: AuditEventType, ip_address: str = "10.0.0.1") -> AuditLog:
    return AuditLog(
        id=uuid4(),
        event_type=event_type.value,
        ip_address=ip_address,
        user_agent="curl/8.0",
        event_metadata={},
        timestamp=datetime(2026, 10, 10, 8, 30, 0),
    )


@pytest.mark.asyncio
async def test_list_audit_logs_passes_filters(mock_uow):
    logs = [make_log(AuditEventType.login_failed), make_log(AuditEventType.login_failed)]
    mock_uow.audit_logs.find.return_value = logs
    filters = AuditLogFilters(event_type="login_failed", ip_address="10.0.0.1", limit=5)

    result = await ListAuditLogsUseCase(mock_uow).execute(filters)

    assert result.is_ok()
    assert len(result.value.logs) == 2
    assert result.value.logs[0].event_type == "login_failed"
    mock_uow.audit_logs.find.assert_called_once_with(filters)


@pytest.mark.asyncio
async def test_list_audit_logs_without_filters_uses_defaults(mock_uow):
    result = await ListAuditLogsUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.logs == []
    (filters,), _ = mock_uow.audit_logs.find.call_args
    assert filters.limit == 100
    assert filters.skip == 0


@pytest.mark.asyncio
async def test_list_audit_logs_validation_error(mock_uow):
    mock_uow.audit_logs.find.side_effect = ValidationError("Invalid user id: 'x'")

    result = await ListAuditLogsUseCase(mock_uow).execute(AuditLogFilters(user_id="x"))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_get_audit_stats(mock_uow):
    mock_uow.audit_logs.get_stats.return_value = AuditStats(
        total_logs=4,
        event_type_counts={"login_failed": 3, "login_success": 1},
        success_rate=25.0,
    )

    result = await GetAuditStatsUseCase(mock_uow).execute(
        AuditStatsFilters(start_date=datetime(2026, 9, 1))
    )

    assert result.is_ok()
    assert result.value.total_logs == 4
    assert result.value.event_type_counts == {"login_failed": 3, "login_success": 1}
    assert result.value.success_rate == 25.0


@pytest.mark.asyncio
async def test_get_audit_stats_store_unavailable(mock_uow):
    mock_uow.audit_logs.get_stats.side_effect = StoreUnavailable("Audit store stats failed")

    result = await GetAuditStatsUseCase(mock_uow).execute()

    assert result.is_err()
    assert result.error.code == "STORE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_get_security_events(mock_uow):
    mock_uow.audit_logs.get_recent_security_events.return_value = [
        make_log(AuditEventType.account_locked),
    ]

    result = await GetSecurityEventsUseCase(mock_uow).execute(
        SecurityEventsOptions(limit=15)
    )

    assert result.is_ok()
    assert [event.event_type for event in result.value.events] == ["account_locked"]
    (options,), _ = mock_uow.audit_logs.get_recent_security_events.call_args
    assert options.limit == 15
