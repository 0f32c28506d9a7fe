"""
AuditLog Entity

Immutable record of a security- or business-relevant event.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from audit_service.domain.base import utcnow

UNKNOWN = "unknown"


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - one row per audited action.

    Business Rules:
    - Immutable (never updated, only bulk-deleted by retention cleanup)
    - timestamp is assigned by the store at insert
    - user_id nullable for system-initiated and anonymous events
    - ip_address / user_agent default to "unknown"
    """

    __tablename__ = "audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_type: str = Field(max_length=64, nullable=False)
    user_id: Optional[UUID] = Field(default=None)

    ip_address: str = Field(default=UNKNOWN, max_length=64)
    user_agent: str = Field(default=UNKNOWN)
    event_metadata: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    resource: Optional[str] = Field(default=None, max_length=255)  # e.g. "product:123"
    action: Optional[str] = Field(default=None, max_length=100)  # e.g. "delete"
    success: bool = Field(default=True)

    timestamp: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    __table_args__ = (
        Index("idx_audit_logs_timestamp", "timestamp"),
        Index("idx_audit_logs_type_timestamp", "event_type", "timestamp"),
        Index("idx_audit_logs_ip_type", "ip_address", "event_type"),
        Index("idx_audit_logs_user_id", "user_id"),
    )
