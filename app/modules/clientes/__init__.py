# app/modules/clientes/__init__.py
"""
Módulo Clientes - Listado de clientes/leads del CRM

- Búsqueda libre sobre los campos de texto
- Filtros por estado, UF, ciudad, instancia, banco y rango de fechas
- Paginación con conteo exacto

Todo el filtrado se delega a PostgREST sobre `farol_view`, con el token del
usuario para que apliquen las políticas RLS.
"""

from .router import router
from .service import ClientesService
from .repository import ClientesRepository

__all__ = [
    "router",
    "ClientesService",
    "ClientesRepository"
]
