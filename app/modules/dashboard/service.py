# app/modules/dashboard/service.py
from supabase import Client
from typing import List, Optional
import logging

from app.config.settings import settings
from app.core.exceptions import BackendError, backend_message
from .repository import DashboardRepository
from .schemas import DashboardFilters, DashboardSummary, MonthlyGrowth, StatusSum, as_number

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, client: Client):
        self.client = client
        self.repository = DashboardRepository(client)

    async def get_summary(self, filters: DashboardFilters) -> DashboardSummary:
        """
        Resumen financiero del dashboard.

        Cada figura se consulta por separado; si alguna falla las demás se
        devuelven igual y `error` lleva el primer mensaje del backend. Solo
        cuando fallan todas se responde con error.
        """
        params = filters.rpc_params()
        errors: List[str] = []

        status_sums: List[StatusSum] = []
        try:
            status_sums = [StatusSum(**r) for r in self.repository.status_sums(params)]
        except Exception as e:
            logger.warning(f"rpc_status_sum -> {backend_message(e)}")
            errors.append(backend_message(e))

        monthly: List[MonthlyGrowth] = []
        try:
            monthly = [MonthlyGrowth(**r) for r in self.repository.monthly_growth(params)]
        except Exception as e:
            logger.warning(f"rpc_monthly_growth -> {backend_message(e)}")
            errors.append(backend_message(e))

        paid_total = 0.0
        try:
            paid_total = as_number(self.repository.paid_total())
        except Exception as e:
            logger.warning(f"farol_paid_sum -> {backend_message(e)}")
            errors.append(backend_message(e))

        if len(errors) == 3:
            raise BackendError(errors[0])

        return DashboardSummary(
            status_sums=status_sums,
            monthly=monthly,
            paid_total=paid_total,
            total_saldo=sum(s.saldo_sum for s in status_sums),
            error=errors[0] if errors else None,
        )

    async def get_status_options(self, limit: Optional[int] = None) -> List[str]:
        """Estados distintos visibles para el usuario, ordenados"""
        try:
            return self.repository.distinct_statuses(limit or settings.status_options_limit)
        except Exception as e:
            raise BackendError(backend_message(e))
