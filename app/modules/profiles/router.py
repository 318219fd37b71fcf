# app/modules/profiles/router.py
from fastapi import APIRouter, Body, Depends
from supabase import Client
from typing import Optional

from app.config.supabase import get_admin_client
from app.core.auth.dependencies import get_current_profile, get_current_user, get_superadmin_profile
from app.core.auth.schemas import CurrentUser
from app.shared.schemas.common import ApiResponse, ok_response
from .schemas import AllowedTablesUpdate, DefaultTableUpdate, Profile
from .service import ProfilesService

router = APIRouter()


@router.get("", response_model=ApiResponse)
async def get_me(
    profile: Profile = Depends(get_current_profile)
):
    """
    Perfil completo del usuario autenticado

    **Headers requeridos:**
    - Authorization: Bearer {access_token de Supabase}
    """
    return ok_response(profile)


@router.patch("", response_model=ApiResponse)
async def update_default_table(
    body: Optional[DefaultTableUpdate] = Body(None),
    current_user: CurrentUser = Depends(get_current_user),
    admin: Client = Depends(get_admin_client)
):
    """
    Cambiar la tabla por defecto (`default_table`) del usuario

    **Body:** `{"defaultTable": "Farol"}`

    La tabla debe estar en `allowed_tables` del usuario (si tiene alguna registrada).
    """
    service = ProfilesService(admin)
    return ok_response(await service.update_default_table(current_user.id, body or DefaultTableUpdate()))


@router.patch("/allowed-tables", response_model=ApiResponse)
async def grant_allowed_tables(
    body: Optional[AllowedTablesUpdate] = Body(None),
    profile: Profile = Depends(get_superadmin_profile),
    admin: Client = Depends(get_admin_client)
):
    """
    Agregar tablas a las permitidas del propio usuario

    **Body:** `{"add": ["Farol", "BANCO V8"], "defaultTable": "BANCO V8"}`

    **Permisos:** Solo superadmin. Las tablas fuera de la lista blanca se ignoran.
    """
    service = ProfilesService(admin)
    return ok_response(await service.grant_allowed_tables(profile, body or AllowedTablesUpdate()))


@router.get("/tables", response_model=ApiResponse)
async def get_my_tables(
    current_user: CurrentUser = Depends(get_current_user),
    admin: Client = Depends(get_admin_client)
):
    """Tablas del CRM disponibles, permitidas y seleccionada para el usuario"""
    service = ProfilesService(admin)
    return ok_response(await service.get_my_tables(current_user.id))
