# app/modules/dashboard/schemas.py
from pydantic import BaseModel, Field, validator
from typing import List, Optional

NO_STATUS = "Sem status"


def as_number(v) -> float:
    # numeric llega como string desde PostgREST; null cuenta como 0
    if v is None or v == "":
        return 0.0
    return float(v)


class StatusSum(BaseModel):
    status: str = NO_STATUS
    saldo_sum: float = 0.0

    @validator('status', pre=True)
    def default_status(cls, v):
        return v if v else NO_STATUS

    @validator('saldo_sum', pre=True)
    def coerce_number(cls, v):
        return as_number(v)


class MonthlyGrowth(BaseModel):
    mes: Optional[str] = None
    total_saldo: float = 0.0
    total_pago: float = 0.0

    @validator('mes', pre=True)
    def to_text(cls, v):
        return str(v) if v is not None else v

    @validator('total_saldo', 'total_pago', pre=True)
    def coerce_number(cls, v):
        return as_number(v)


class DashboardFilters(BaseModel):
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    statuses: List[str] = Field(default_factory=list)

    def rpc_params(self) -> dict:
        """Parámetros de rpc_status_sum / rpc_monthly_growth (vacíos como null)"""
        return {
            "_from": self.date_from or None,
            "_to": self.date_to or None,
            "_statuses": self.statuses or None,
        }


class DashboardSummary(BaseModel):
    status_sums: List[StatusSum] = Field(default_factory=list)
    monthly: List[MonthlyGrowth] = Field(default_factory=list)
    paid_total: float = 0.0
    total_saldo: float = 0.0
    error: Optional[str] = None
