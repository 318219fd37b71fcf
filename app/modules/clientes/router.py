# app/modules/clientes/router.py
from fastapi import APIRouter, Depends, Query
from supabase import Client
from typing import Optional

from app.config.settings import settings
from app.config.supabase import get_user_client
from app.core.auth.dependencies import get_current_user
from app.core.auth.schemas import CurrentUser
from app.shared.schemas.common import ApiResponse, ok_response
from .schemas import ClienteFilters
from .service import ClientesService

router = APIRouter()


@router.get("", response_model=ApiResponse)
async def list_clientes(
    q: Optional[str] = Query(None, description="Busca en nome, cpf, telefone, status, cidade, uf, instancia y banco"),
    status: Optional[str] = Query(None, description="Estado exacto"),
    uf: Optional[str] = Query(None, description="UF exacta"),
    cidade: Optional[str] = Query(None, description="Ciudad (contiene)"),
    instancia: Optional[str] = Query(None, description="Instancia (contiene)"),
    banco: Optional[str] = Query(None, description="Banco simulado (contiene)"),
    data_de: Optional[str] = Query(None, description="Última respuesta desde (ISO 8601)"),
    data_ate: Optional[str] = Query(None, description="Última respuesta hasta (ISO 8601)"),
    page: int = Query(1, ge=1, description="Página"),
    page_size: Optional[int] = Query(None, ge=1, le=200, description="Registros por página"),
    current_user: CurrentUser = Depends(get_current_user),
    client: Client = Depends(get_user_client)
):
    """
    Listado paginado de clientes/leads

    Ordenado por la última respuesta (más reciente primero). Las filas visibles
    dependen de las políticas RLS del usuario en el backend.
    """
    filters = ClienteFilters(
        q=q, status=status, uf=uf, cidade=cidade, instancia=instancia,
        banco=banco, data_de=data_de, data_ate=data_ate
    )
    service = ClientesService(client)
    result = await service.list_clientes(filters, page, page_size or settings.clientes_page_size)
    return ok_response(result)
