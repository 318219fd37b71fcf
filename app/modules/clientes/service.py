# app/modules/clientes/service.py
from supabase import Client
import logging
import math

from app.core.exceptions import BackendError, backend_message
from .repository import ClientesRepository
from .schemas import ClienteFilters, ClienteRow, ClientesPage

logger = logging.getLogger(__name__)


class ClientesService:
    def __init__(self, client: Client):
        self.client = client
        self.repository = ClientesRepository(client)

    async def list_clientes(self, filters: ClienteFilters, page: int, page_size: int) -> ClientesPage:
        """
        Página de clientes con los mismos filtros para el conteo y los datos.

        El filtrado por tenant lo hace el backend (RLS sobre `farol_view`).
        """
        try:
            total = self.repository.count(filters)
        except Exception as e:
            logger.warning(f"count farol_view -> {backend_message(e)}")
            raise BackendError(backend_message(e))

        try:
            rows = self.repository.get_page(filters, page, page_size)
        except Exception as e:
            logger.warning(f"farol_view -> {backend_message(e)}")
            raise BackendError(backend_message(e))

        return ClientesPage(
            items=[ClienteRow(**row) for row in rows],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=max(1, math.ceil(total / page_size)),
        )
