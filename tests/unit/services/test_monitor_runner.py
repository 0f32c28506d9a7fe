from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from audit_service.app.services.monitor_runner import run_continuous, run_once
from audit_service.app.services.security_report import (
    FailedLoginsReport,
    SecurityEventsReport,
    SecurityReport,
    StatsReport,
    SuspiciousIpsReport,
)
from audit_service.domain.errors import StoreUnavailable


def empty_report() -> SecurityReport:
    return SecurityReport(
        generated_at=datetime(2026, 10, 17, 9, 0, 0),
        stats=StatsReport(window_days=30, total_logs=0, success_rate=0, top_event_types=[]),
        failed_logins=FailedLoginsReport(entries=[]),
        suspicious_ips=SuspiciousIpsReport(threshold=5, window_hours=24, ips=[]),
        security_events=SecurityEventsReport(events=[]),
    )


class FakeClock:
    """Monotonic clock advanced by each render/sleep"""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.mark.asyncio
async def test_run_once_renders_report():
    report = empty_report()
    produce = AsyncMock(return_value=report)
    render = MagicMock()

    assert await run_once(produce, render) is True
    render.assert_called_once_with(report)


@pytest.mark.asyncio
async def test_run_once_reports_failure():
    produce = AsyncMock(side_effect=StoreUnavailable("Audit store find failed"))
    render = MagicMock()

    assert await run_once(produce, render) is False
    render.assert_not_called()


@pytest.mark.asyncio
async def test_run_continuous_keeps_going_after_failed_cycle():
    produce = AsyncMock(
        side_effect=[StoreUnavailable("down"), empty_report(), empty_report()]
    )
    render = MagicMock()
    sleep = AsyncMock()

    failures = await run_continuous(
        produce, render, interval_seconds=60, max_cycles=3, sleep=sleep, clock=FakeClock()
    )

    assert failures == 1
    assert produce.call_count == 3
    assert render.call_count == 2
    # no sleep after the last cycle
    assert sleep.call_count == 2


@pytest.mark.asyncio
async def test_run_continuous_schedules_from_cycle_start():
    clock = FakeClock()

    def slow_render(report):
        clock.now += 15.0

    async def sleep(seconds):
        sleeps.append(seconds)
        clock.now += seconds

    sleeps = []
    produce = AsyncMock(return_value=empty_report())

    await run_continuous(
        produce, slow_render, interval_seconds=60, max_cycles=3, sleep=sleep, clock=clock
    )

    assert sleeps == [45.0, 45.0]


@pytest.mark.asyncio
async def test_run_continuous_overrunning_cycle_does_not_sleep():
    clock = FakeClock()

    def very_slow_render(report):
        clock.now += 90.0

    sleep = AsyncMock()
    produce = AsyncMock(return_value=empty_report())

    await run_continuous(
        produce, very_slow_render, interval_seconds=60, max_cycles=2, sleep=sleep, clock=clock
    )

    sleep.assert_called_once_with(0.0)
