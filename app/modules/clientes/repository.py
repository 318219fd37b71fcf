# app/modules/clientes/repository.py
from supabase import Client
from typing import Any, Dict, List, Tuple

from .schemas import ClienteFilters

VIEW = "farol_view"
LIST_COLUMNS = (
    "id,nome,telefone,cpf,status,saldo,pago,horario_da_ultima_resposta,"
    "instancia,banco_simulado,uf,cidade"
)
SEARCH_COLUMNS = [
    "nome", "cpf", "telefone", "status", "cidade", "uf", "instancia", "banco_simulado"
]
# Caracteres con significado en la sintaxis or=(...) de PostgREST
_OR_RESERVED = str.maketrans("", "", ",()")


def search_expression(term: str) -> str:
    like = f"%{term.translate(_OR_RESERVED).strip()}%"
    return ",".join(f"{column}.ilike.{like}" for column in SEARCH_COLUMNS)


class ClientesRepository:
    """Lectura de la vista `farol_view` con el cliente del usuario (RLS)"""

    def __init__(self, client: Client):
        self.client = client

    def _apply_filters(self, query, filters: ClienteFilters):
        if filters.q:
            query = query.or_(search_expression(filters.q))
        if filters.status:
            query = query.eq("status", filters.status)
        if filters.uf:
            query = query.eq("uf", filters.uf)
        if filters.cidade:
            query = query.ilike("cidade", f"%{filters.cidade}%")
        if filters.instancia:
            query = query.ilike("instancia", f"%{filters.instancia}%")
        if filters.banco:
            query = query.ilike("banco_simulado", f"%{filters.banco}%")
        if filters.data_de:
            query = query.gte("horario_da_ultima_resposta", filters.data_de)
        if filters.data_ate:
            query = query.lte("horario_da_ultima_resposta", filters.data_ate)
        return query

    def count(self, filters: ClienteFilters) -> int:
        query = self.client.table(VIEW).select("id", count="exact", head=True)
        result = self._apply_filters(query, filters).execute()
        return result.count or 0

    def get_page(self, filters: ClienteFilters, page: int, page_size: int) -> List[Dict[str, Any]]:
        start, end = page_range(page, page_size)
        query = self._apply_filters(self.client.table(VIEW).select(LIST_COLUMNS), filters)
        result = (
            query
            .order("horario_da_ultima_resposta", desc=True)
            .range(start, end)
            .execute()
        )
        return list(result.data or [])


def page_range(page: int, page_size: int) -> Tuple[int, int]:
    """Rango inclusivo [desde, hasta] para .range() de PostgREST"""
    start = (page - 1) * page_size
    return start, start + page_size - 1
