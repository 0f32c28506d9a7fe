"""
Security Monitor Runner

Drives report cycles in one-shot or continuous mode. A cycle that fails is
logged; in continuous mode the next tick is still scheduled.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

from audit_service.app.services.security_report import SecurityReport

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 60

ReportProducer = Callable[[], Awaitable[SecurityReport]]
ReportRenderer = Callable[[SecurityReport], None]


async def run_once(produce_report: ReportProducer, render: ReportRenderer) -> bool:
    """Run a single cycle. Returns False if the cycle failed."""
    try:
        report = await produce_report()
        render(report)
    except Exception:
        logger.exception("Security monitoring cycle failed")
        return False
    return True


async def run_continuous(
    produce_report: ReportProducer,
    render: ReportRenderer,
    interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
    max_cycles: Optional[int] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Repeat cycles every interval_seconds, measured from each cycle's start.

    Runs until max_cycles is reached (forever when None). Returns the number
    of failed cycles.
    """
    cycles = 0
    failures = 0
    while max_cycles is None or cycles < max_cycles:
        started = clock()
        if not await run_once(produce_report, render):
            failures += 1
        cycles += 1

        if max_cycles is not None and cycles >= max_cycles:
            break

        delay = max(0.0, started + interval_seconds - clock())
        logger.debug(f"Next monitoring cycle in {delay:.1f}s")
        await sleep(delay)

    return failures
