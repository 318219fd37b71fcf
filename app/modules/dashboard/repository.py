# app/modules/dashboard/repository.py
from supabase import Client
from typing import Any, Dict, List, Optional


class DashboardRepository:
    """Agregados calculados por el backend (RPCs y vistas), leídos con RLS"""

    def __init__(self, client: Client):
        self.client = client

    def status_sums(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        result = self.client.rpc("rpc_status_sum", params).execute()
        return list(result.data or [])

    def monthly_growth(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        result = self.client.rpc("rpc_monthly_growth", params).execute()
        return list(result.data or [])

    def paid_total(self) -> Optional[Any]:
        result = self.client.table("farol_paid_sum").select("total").limit(1).execute()
        rows = result.data or []
        return rows[0].get("total") if rows else None

    def distinct_statuses(self, limit: int) -> List[str]:
        result = (
            self.client.table("farol_view")
            .select("status")
            .not_.is_("status", "null")
            .limit(limit)
            .execute()
        )
        return sorted({row["status"] for row in (result.data or []) if row.get("status")})
