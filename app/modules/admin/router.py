# app/modules/admin/router.py
from fastapi import APIRouter, Body, Depends, Path, Query, status
from supabase import Client
from typing import Optional

from app.config.supabase import get_admin_client
from app.core.auth.dependencies import get_superadmin_profile
from app.modules.profiles.schemas import Profile
from app.shared.schemas.common import ApiResponse, ok_response
from .schemas import ActiveUpdate, CreateUserRequest
from .service import AdminService

router = APIRouter()


# ==================== USUARIOS ====================

@router.post("/create-user", response_model=ApiResponse, status_code=status.HTTP_200_OK)
async def create_user(
    user_data: Optional[CreateUserRequest] = Body(None),
    current_user: Profile = Depends(get_superadmin_profile),
    admin: Client = Depends(get_admin_client)
):
    """
    Invitar un nuevo usuario al CRM

    **Proceso:**
    1. Verifica que el solicitante sea superadmin (rol leído en el momento)
    2. Valida `email` y `role`
    3. Filtra `allowedTables` contra la lista blanca (rpc_list_crm_tables);
       si no queda ninguna se usa la primera tabla permitida
    4. Envía la invitación por email
    5. Crea/actualiza el perfil con `is_active = true`

    **Permisos:** Solo superadmin
    """
    service = AdminService(admin)
    created = await service.create_user(user_data or CreateUserRequest(), current_user.user_id)
    return ok_response(created)


@router.get("/users", response_model=ApiResponse)
async def list_users(
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Máximo de perfiles"),
    current_user: Profile = Depends(get_superadmin_profile),
    admin: Client = Depends(get_admin_client)
):
    """
    Listar perfiles, más recientes primero

    **Permisos:** Solo superadmin
    """
    service = AdminService(admin)
    return ok_response(await service.list_users(limit))


@router.patch("/users/{user_id}/active", response_model=ApiResponse)
async def set_user_active(
    user_id: str = Path(..., description="user_id del perfil"),
    body: Optional[ActiveUpdate] = Body(None),
    current_user: Profile = Depends(get_superadmin_profile),
    admin: Client = Depends(get_admin_client)
):
    """
    Activar o desactivar un usuario

    **Body opcional:** `{"isActive": false}`. Sin body se invierte el estado actual.

    **Permisos:** Solo superadmin
    """
    service = AdminService(admin)
    return ok_response(await service.set_active(user_id, body or ActiveUpdate()))


# ==================== TABLAS ====================

@router.get("/tables", response_model=ApiResponse)
async def list_tables(
    current_user: Profile = Depends(get_superadmin_profile),
    admin: Client = Depends(get_admin_client)
):
    """Lista blanca de tablas del CRM (table_name, display_name)"""
    service = AdminService(admin)
    return ok_response(await service.list_tables())


@router.get("/tables/{table}/clientes", response_model=ApiResponse)
async def list_clientes_for_table(
    table: str = Path(..., description="Nombre de la tabla"),
    current_user: Profile = Depends(get_superadmin_profile),
    admin: Client = Depends(get_admin_client)
):
    """Clientes (orgs) distintos de una tabla, para asignar a nuevos usuarios"""
    service = AdminService(admin)
    return ok_response(await service.list_clientes_for(table))
