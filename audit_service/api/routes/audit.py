"""
Audit API Routes

Read-only audit log endpoints for the admin dashboard.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from audit_service.api.error import raise_for_error
from audit_service.api.utils.admin_auth import verify_admin_api_key
from audit_service.app.services.unit_of_work import UnitOfWork
from audit_service.app.use_cases.audit import (
    AuditLogListResponse,
    AuditStatsResponse,
    GetAuditStatsUseCase,
    GetSecurityEventsUseCase,
    ListAuditLogsUseCase,
    SecurityEventsResponse,
)
from audit_service.depends import get_unit_of_work
from audit_service.domain.dtos import (
    AuditLogFilters,
    AuditStatsFilters,
    SecurityEventsOptions,
)

router = APIRouter(
    prefix="/audit-logs",
    tags=["Audit"],
    dependencies=[Depends(verify_admin_api_key)],
)


@router.get(
    "/stats",
    status_code=status.HTTP_200_OK,
    response_model=AuditStatsResponse,
)
async def get_audit_stats(
    uow: UnitOfWork = Depends(get_unit_of_work),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    user_id: Optional[str] = Query(None),
):
    """
    Audit Log Statistics

    Returns total event count, per-type counts and success rate.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (malformed user_id or date range)
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: STORE_UNAVAILABLE
    """
    use_case = GetAuditStatsUseCase(uow)
    result = await use_case.execute(
        AuditStatsFilters(user_id=user_id, start_date=start_date, end_date=end_date)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/security-events",
    status_code=status.HTTP_200_OK,
    response_model=SecurityEventsResponse,
)
async def get_security_events(
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(15, ge=1, le=1000, description="Maximum number of events"),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
):
    """
    Recent Security Events

    Logins, logouts, lockouts, CSRF failures, 2FA and password changes,
    newest first.
    """
    use_case = GetSecurityEventsUseCase(uow)
    result = await use_case.execute(
        SecurityEventsOptions(limit=limit, start_date=start_date, end_date=end_date)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=AuditLogListResponse,
)
async def list_audit_logs(
    uow: UnitOfWork = Depends(get_unit_of_work),
    event_type: Optional[str] = Query(None),
    ip_address: Optional[str] = Query(None),
    user_id: Optional[str] = Query(None),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of logs"),
    skip: int = Query(0, ge=0, description="Number of logs to skip"),
):
    """
    List Audit Logs

    Query Parameters:
        - event_type, ip_address, user_id: exact-match filters
        - start_date, end_date: inclusive timestamp range
        - limit / skip: pagination

    Returns:
        - logs: matching audit logs, newest first
    """
    use_case = ListAuditLogsUseCase(uow)
    result = await use_case.execute(
        AuditLogFilters(
            event_type=event_type,
            ip_address=ip_address,
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
            skip=skip,
        )
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
