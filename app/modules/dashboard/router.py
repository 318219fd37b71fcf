# app/modules/dashboard/router.py
from fastapi import APIRouter, Depends, Query
from supabase import Client
from typing import List, Optional

from app.config.supabase import get_user_client
from app.core.auth.dependencies import get_current_user
from app.core.auth.schemas import CurrentUser
from app.shared.schemas.common import ApiResponse, ok_response
from .schemas import DashboardFilters
from .service import DashboardService

router = APIRouter()


@router.get("/summary", response_model=ApiResponse)
async def get_dashboard_summary(
    date_from: Optional[str] = Query(None, alias="from", description="Fecha inicial (YYYY-MM-DD)"),
    date_to: Optional[str] = Query(None, alias="to", description="Fecha final (YYYY-MM-DD)"),
    statuses: Optional[List[str]] = Query(None, description="Filtrar por estados (repetible)"),
    current_user: CurrentUser = Depends(get_current_user),
    client: Client = Depends(get_user_client)
):
    """
    Resumen financiero del dashboard

    **Incluye:**
    - Saldo sumado por estado (rpc_status_sum)
    - Evolución mensual de saldo y pagado (rpc_monthly_growth)
    - Total pagado (farol_paid_sum)
    - Saldo total
    """
    filters = DashboardFilters(
        date_from=date_from,
        date_to=date_to,
        statuses=[s for s in (statuses or []) if s],
    )
    service = DashboardService(client)
    return ok_response(await service.get_summary(filters))


@router.get("/statuses", response_model=ApiResponse)
async def get_status_options(
    current_user: CurrentUser = Depends(get_current_user),
    client: Client = Depends(get_user_client)
):
    """Estados distintos disponibles para el filtro del dashboard"""
    service = DashboardService(client)
    return ok_response(await service.get_status_options())
