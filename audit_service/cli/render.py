"""
Rich rendering of the security report.
"""

from datetime import datetime
from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from audit_service.app.services.security_report import (
    FailedLoginsReport,
    SecurityEventsReport,
    SecurityReport,
    StatsReport,
    SuspiciousIpsReport,
)


def _format_time(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S UTC")


def _section(console: Console, title: str) -> None:
    console.print()
    console.rule(f"[bold]{title}[/bold]", align="left")


def render_stats(console: Console, stats: StatsReport) -> None:
    _section(console, f"📊 Audit Log Statistics (Last {stats.window_days} Days)")
    console.print(f"Total Events: [bold]{stats.total_logs}[/bold]")
    console.print(f"Success Rate: [bold]{stats.success_rate:.2f}%[/bold]")

    if not stats.top_event_types:
        return

    table = Table(title="Event Type Breakdown", box=box.SIMPLE, title_justify="left")
    table.add_column("", width=2)
    table.add_column("Event Type")
    table.add_column("Count", justify="right")
    for item in stats.top_event_types:
        table.add_row(item.icon, item.event_type, str(item.count))
    console.print(table)


def render_failed_logins(console: Console, report: FailedLoginsReport) -> None:
    title = "🚨 Recent Failed Login Attempts"
    if report.ip_address:
        title += f" from {report.ip_address}"
    _section(console, title)

    if not report.entries:
        console.print("[green]✅ No failed login attempts found[/green]")
        return

    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Time")
    table.add_column("Email")
    table.add_column("IP")
    table.add_column("User Agent", overflow="fold")
    for index, entry in enumerate(report.entries, start=1):
        table.add_row(
            str(index),
            _format_time(entry.timestamp),
            entry.email,
            entry.ip_address,
            entry.user_agent,
        )
    console.print(table)


def render_suspicious_ips(console: Console, report: SuspiciousIpsReport) -> None:
    _section(
        console,
        f"⚠️  Suspicious IP Addresses ({report.threshold}+ failed attempts "
        f"in {report.window_hours}h)",
    )

    if not report.ips:
        console.print("[green]✅ No suspicious IP addresses detected[/green]")
        return

    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("#", justify="right", style="dim")
    table.add_column("IP", style="red")
    table.add_column("Failed Attempts", justify="right")
    table.add_column("Targeted Emails", overflow="fold")
    table.add_column("Last Attempt")
    for index, ip in enumerate(report.ips, start=1):
        table.add_row(
            str(index),
            ip.ip_address,
            str(ip.attempts),
            ", ".join(ip.emails),
            _format_time(ip.last_attempt),
        )
    console.print(table)
    console.print("🔒 Consider blocking these IPs in your firewall or rate limiter")


def render_security_events(console: Console, report: SecurityEventsReport) -> None:
    _section(console, "🔐 Recent Security Events")

    if not report.events:
        console.print("[green]✅ No recent security events[/green]")
        return

    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("#", justify="right", style="dim")
    table.add_column("", width=2)
    table.add_column("Event")
    table.add_column("Time")
    table.add_column("IP")
    table.add_column("Email")
    for index, event in enumerate(report.events, start=1):
        table.add_row(
            str(index),
            event.icon,
            event.event_type.upper(),
            _format_time(event.timestamp),
            event.ip_address,
            event.email or "",
        )
    console.print(table)


def render_report(
    console: Console,
    report: SecurityReport,
    refresh_seconds: Optional[int] = None,
    clear_screen: bool = False,
) -> None:
    """
    Print the whole dashboard.

    refresh_seconds is set in watch mode; clear_screen wipes the previous
    dashboard first.
    """
    if clear_screen:
        console.clear()

    console.print(
        Panel(
            f"[bold]Security Monitoring Dashboard[/bold]\n{_format_time(report.generated_at)}",
            box=box.DOUBLE,
            expand=True,
        )
    )

    render_stats(console, report.stats)
    render_failed_logins(console, report.failed_logins)
    render_suspicious_ips(console, report.suspicious_ips)
    render_security_events(console, report.security_events)

    console.print()
    console.rule()
    console.print(f"Monitoring complete at {_format_time(report.generated_at)}")
    if refresh_seconds is not None:
        console.print(f"Refreshing in {refresh_seconds} seconds... (Press Ctrl+C to exit)")
