# app/modules/dashboard/__init__.py
"""
Módulo Dashboard - Resumen financiero del CRM

- Saldo por estado
- Crecimiento mensual (saldo vs. pagado)
- Total pagado
- Opciones de estado para los filtros

Los agregados los calcula el backend (stored procedures y vistas).
"""

from .router import router
from .service import DashboardService
from .repository import DashboardRepository

__all__ = [
    "router",
    "DashboardService",
    "DashboardRepository"
]
