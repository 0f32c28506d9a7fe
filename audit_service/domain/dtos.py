"""
Audit Store DTOs

Inputs and outputs of the audit store. Shape checks that need a store-level
error (ValidationError) happen in the repository, not here.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field

from audit_service.domain.entities import AuditEventType

DEFAULT_FIND_LIMIT = 100
DEFAULT_SECURITY_EVENTS_LIMIT = 50


class AuditLogCreate(BaseModel):
    """Payload for recording an audit event. timestamp is never accepted."""

    event_type: AuditEventType
    user_id: Optional[Union[UUID, str]] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    resource: Optional[str] = None
    action: Optional[str] = None
    success: Optional[bool] = None


class AuditStatsFilters(BaseModel):
    user_id: Optional[Union[UUID, str]] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class AuditLogFilters(AuditStatsFilters):
    event_type: Optional[str] = None
    ip_address: Optional[str] = None
    limit: int = DEFAULT_FIND_LIMIT
    skip: int = 0


class SecurityEventsOptions(BaseModel):
    limit: int = DEFAULT_SECURITY_EVENTS_LIMIT
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class AuditStats(BaseModel):
    total_logs: int
    event_type_counts: Dict[str, int] = Field(default_factory=dict)
    success_rate: float = 0.0
