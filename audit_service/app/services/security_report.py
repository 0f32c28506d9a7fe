"""
Security Report Generator

Builds a point-in-time security report from the audit store. Each sub-report
is an independent read; generate() runs all four.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from pydantic import BaseModel

from audit_service.app.services.unit_of_work import UnitOfWork
from audit_service.domain.base import utcnow
from audit_service.domain.dtos import (
    AuditLogFilters,
    AuditStatsFilters,
    SecurityEventsOptions,
)
from audit_service.domain.entities import UNKNOWN, AuditEventType

EVENT_ICONS: Dict[str, str] = {
    AuditEventType.login_failed.value: "❌",
    AuditEventType.login_success.value: "✅",
    AuditEventType.account_locked.value: "🔒",
    AuditEventType.suspicious_activity.value: "⚠️",
    AuditEventType.password_changed.value: "🔑",
    AuditEventType.two_fa_enabled.value: "🛡️",
    AuditEventType.two_fa_disabled.value: "⚡",
    AuditEventType.csrf_token_invalid.value: "🚫",
}
DEFAULT_ICON = "📝"


def event_icon(event_type: str) -> str:
    return EVENT_ICONS.get(event_type, DEFAULT_ICON)


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[:width] + "..."


class ReportPolicy(BaseModel):
    """Thresholds and sizes used by the report"""

    failed_login_limit: int = 20
    security_event_limit: int = 15
    suspicious_ip_threshold: int = 5
    suspicious_ip_sample_size: int = 1000
    suspicious_ip_window_hours: int = 24
    stats_window_days: int = 30
    top_event_types: int = 10
    user_agent_width: int = 60

    @classmethod
    def from_config(cls, config) -> "ReportPolicy":
        return cls(
            suspicious_ip_threshold=config.SUSPICIOUS_IP_THRESHOLD,
            suspicious_ip_sample_size=config.SUSPICIOUS_IP_SAMPLE_SIZE,
            suspicious_ip_window_hours=config.SUSPICIOUS_IP_WINDOW_HOURS,
            stats_window_days=config.STATS_WINDOW_DAYS,
        )


# ============================================================================
# Report models
# ============================================================================


class FailedLoginEntry(BaseModel):
    timestamp: datetime
    email: str
    ip_address: str
    user_agent: str


class FailedLoginsReport(BaseModel):
    ip_address: Optional[str] = None
    entries: List[FailedLoginEntry]


class SuspiciousIp(BaseModel):
    ip_address: str
    attempts: int
    emails: List[str]
    last_attempt: datetime


class SuspiciousIpsReport(BaseModel):
    threshold: int
    window_hours: int
    ips: List[SuspiciousIp]


class SecurityEventEntry(BaseModel):
    icon: str
    event_type: str
    timestamp: datetime
    ip_address: str
    email: Optional[str] = None


class SecurityEventsReport(BaseModel):
    events: List[SecurityEventEntry]


class EventTypeCount(BaseModel):
    icon: str
    event_type: str
    count: int


class StatsReport(BaseModel):
    window_days: int
    total_logs: int
    success_rate: float
    top_event_types: List[EventTypeCount]


class SecurityReport(BaseModel):
    generated_at: datetime
    stats: StatsReport
    failed_logins: FailedLoginsReport
    suspicious_ips: SuspiciousIpsReport
    security_events: SecurityEventsReport


# ============================================================================
# Generator
# ============================================================================


class SecurityReportGenerator:
    """
    Reads the audit store and assembles the security monitoring report.

    Sub-reports:
    - failed_logins: most recent failed logins, optionally for one IP
    - suspicious_ips: IPs with repeated failed logins inside the window
    - security_events: recent security-relevant events with icons
    - stats: totals, success rate and top event types over the stats window

    Read-only; no state is kept between calls.
    """

    def __init__(self, uow: UnitOfWork, policy: Optional[ReportPolicy] = None):
        self.uow = uow
        self.policy = policy or ReportPolicy()

    async def failed_logins(self, ip_address: Optional[str] = None) -> FailedLoginsReport:
        filters = AuditLogFilters(
            event_type=AuditEventType.login_failed.value,
            ip_address=ip_address,
            limit=self.policy.failed_login_limit,
        )
        async with self.uow:
            logs = await self.uow.audit_logs.find(filters)
            entries = [
                FailedLoginEntry(
                    timestamp=log.timestamp,
                    email=(log.event_metadata or {}).get("email") or UNKNOWN,
                    ip_address=log.ip_address,
                    user_agent=truncate(log.user_agent, self.policy.user_agent_width),
                )
                for log in logs
            ]

        return FailedLoginsReport(ip_address=ip_address, entries=entries)

    async def suspicious_ips(self) -> SuspiciousIpsReport:
        """
        Flag IPs with at least suspicious_ip_threshold failed logins.

        Groups up to suspicious_ip_sample_size recent failures in memory.
        """
        since = utcnow() - timedelta(hours=self.policy.suspicious_ip_window_hours)
        filters = AuditLogFilters(
            event_type=AuditEventType.login_failed.value,
            start_date=since,
            limit=self.policy.suspicious_ip_sample_size,
        )
        by_ip: Dict[str, dict] = {}
        async with self.uow:
            logs = await self.uow.audit_logs.find(filters)
            for log in logs:
                entry = by_ip.setdefault(
                    log.ip_address,
                    {"count": 0, "emails": set(), "last_attempt": log.timestamp},
                )
                entry["count"] += 1
                email = (log.event_metadata or {}).get("email")
                if email:
                    entry["emails"].add(email)
                if log.timestamp > entry["last_attempt"]:
                    entry["last_attempt"] = log.timestamp

        flagged = [
            SuspiciousIp(
                ip_address=ip_address,
                attempts=entry["count"],
                emails=sorted(entry["emails"]),
                last_attempt=entry["last_attempt"],
            )
            for ip_address, entry in by_ip.items()
            if entry["count"] >= self.policy.suspicious_ip_threshold
        ]
        flagged.sort(key=lambda ip: (-ip.attempts, ip.ip_address))

        return SuspiciousIpsReport(
            threshold=self.policy.suspicious_ip_threshold,
            window_hours=self.policy.suspicious_ip_window_hours,
            ips=flagged,
        )

    async def security_events(self) -> SecurityEventsReport:
        options = SecurityEventsOptions(limit=self.policy.security_event_limit)
        async with self.uow:
            events = await self.uow.audit_logs.get_recent_security_events(options)
            entries = [
                SecurityEventEntry(
                    icon=event_icon(event.event_type),
                    event_type=event.event_type,
                    timestamp=event.timestamp,
                    ip_address=event.ip_address,
                    email=(event.event_metadata or {}).get("email"),
                )
                for event in events
            ]

        return SecurityEventsReport(events=entries)

    async def stats(self) -> StatsReport:
        since = utcnow() - timedelta(days=self.policy.stats_window_days)
        async with self.uow:
            stats = await self.uow.audit_logs.get_stats(
                AuditStatsFilters(start_date=since)
            )

        ranked = sorted(
            stats.event_type_counts.items(), key=lambda item: (-item[1], item[0])
        )
        return StatsReport(
            window_days=self.policy.stats_window_days,
            total_logs=stats.total_logs,
            success_rate=stats.success_rate,
            top_event_types=[
                EventTypeCount(icon=event_icon(event_type), event_type=event_type, count=count)
                for event_type, count in ranked[: self.policy.top_event_types]
            ],
        )

    async def generate(self, ip_address: Optional[str] = None) -> SecurityReport:
        stats = await self.stats()
        failed_logins = await self.failed_logins(ip_address)
        suspicious_ips = await self.suspicious_ips()
        security_events = await self.security_events()

        return SecurityReport(
            generated_at=utcnow(),
            stats=stats,
            failed_logins=failed_logins,
            suspicious_ips=suspicious_ips,
            security_events=security_events,
        )
