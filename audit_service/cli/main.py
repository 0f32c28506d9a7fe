"""
Audit Service CLI.

Commands:
- monitor: Security monitoring dashboard (one pass, or --watch to refresh)
- cleanup: Delete audit logs older than the retention window
- init-db: Create the audit tables
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from config import ApplicationConfig
from audit_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from audit_service.app.services.monitor_runner import run_continuous, run_once
from audit_service.app.services.security_report import (
    ReportPolicy,
    SecurityReportGenerator,
)
from audit_service.app.use_cases.audit import CleanupAuditLogsUseCase
from audit_service.cli.render import render_report
from audit_service.depends import AsyncSessionLocal, create_tables, engine
from audit_service.log_config import configure_logging

app = typer.Typer(
    name="audit-monitor",
    help="Audit log security monitoring",
    no_args_is_help=True,
)

# Rich console for output
console = Console()


async def _disposing_engine(coro):
    try:
        return await coro
    finally:
        await engine.dispose()


def _report_producer(ip_address: Optional[str], policy: ReportPolicy):
    """Each cycle gets its own session so a failed cycle cannot poison the next."""

    async def produce():
        async with AsyncSessionLocal() as session:
            generator = SecurityReportGenerator(SqlAlchemyUnitOfWork(session), policy)
            return await generator.generate(ip_address)

    return produce


def _watch_renderer(interval: int):
    """Clears the previous dashboard on every cycle after the first."""
    cycles = {"rendered": 0}

    def render(report):
        render_report(
            console,
            report,
            refresh_seconds=interval,
            clear_screen=cycles["rendered"] > 0,
        )
        cycles["rendered"] += 1

    return render


@app.command()
def monitor(
    watch: bool = typer.Option(
        False, "--watch", help="Refresh the report continuously"
    ),
    ip: Optional[str] = typer.Option(
        None, "--ip", help="Only show failed logins from this IP address"
    ),
) -> None:
    """Print the security monitoring report."""
    configure_logging(ApplicationConfig.LOG_LEVEL)

    policy = ReportPolicy.from_config(ApplicationConfig)
    produce = _report_producer(ip, policy)
    interval = ApplicationConfig.MONITOR_INTERVAL_SECONDS

    if watch:
        console.print(
            f"Starting continuous monitoring (refreshes every {interval} seconds)..."
        )
        try:
            asyncio.run(
                _disposing_engine(
                    run_continuous(
                        produce,
                        _watch_renderer(interval),
                        interval_seconds=interval,
                    )
                )
            )
        except KeyboardInterrupt:
            console.print("\nMonitoring stopped")
        return

    ok = asyncio.run(
        _disposing_engine(run_once(produce, lambda report: render_report(console, report)))
    )
    if not ok:
        console.print("[red]❌ Error running security monitoring[/red]")
        raise typer.Exit(code=1)


@app.command()
def cleanup(
    days: Optional[int] = typer.Option(
        None, "--days", "-d", help="Retention window in days (default from config)"
    ),
) -> None:
    """Delete audit logs older than the retention window."""
    configure_logging(ApplicationConfig.LOG_LEVEL)

    if days is None:
        days = ApplicationConfig.AUDIT_RETENTION_DAYS

    async def _cleanup():
        async with AsyncSessionLocal() as session:
            return await CleanupAuditLogsUseCase(SqlAlchemyUnitOfWork(session)).execute(days)

    result = asyncio.run(_disposing_engine(_cleanup()))
    if result.is_err():
        console.print(f"[red]❌ Cleanup failed:[/red] {result.error.message}")
        raise typer.Exit(code=1)

    console.print(
        f"[green]✅ Cleaned up {result.value.deleted_count} audit logs "
        f"older than {days} days[/green]"
    )


@app.command("init-db")
def init_db() -> None:
    """Create the audit tables."""
    configure_logging(ApplicationConfig.LOG_LEVEL)
    asyncio.run(_disposing_engine(create_tables()))
    console.print("[green]✅ Audit tables ready[/green]")


if __name__ == "__main__":
    app()
