# app/modules/admin/service.py
from supabase import Client
from typing import List, Optional
import logging

from app.config.settings import settings
from app.core.access import permitted_names, sanitize_allowed_tables
from app.core.exceptions import (
    BackendError,
    NotFoundError,
    ValidationFailed,
    backend_message,
)
from app.modules.profiles.schemas import Profile
from app.shared.schemas.common import DatasetDescriptor
from .repository import AdminRepository
from .schemas import ActiveStatusResponse, ActiveUpdate, CreateUserRequest, CreatedUserResponse

logger = logging.getLogger(__name__)


class AdminService:
    """Service para la gestión de usuarios y accesos (superadmin)"""

    def __init__(self, admin: Client):
        self.admin = admin
        self.repository = AdminRepository(admin)

    # =====================================================
    # USUARIOS
    # =====================================================

    async def create_user(self, user_data: CreateUserRequest, requested_by: str) -> CreatedUserResponse:
        """
        Invitar un usuario y crear su perfil.

        Proceso:
        1. Valida campos obligatorios (antes de tocar el backend)
        2. Filtra las tablas pedidas contra la lista blanca del backend
        3. Envía la invitación por email (crea la identidad en Supabase Auth)
        4. Upsert del perfil ligado al user_id devuelto
        """
        if not user_data.email or not user_data.role:
            raise ValidationFailed("Campos obligatorios: email, role")
        if not user_data.has_valid_role():
            raise ValidationFailed(f"Rol inválido: {user_data.role}")

        try:
            permitted = permitted_names(self.repository.list_crm_tables())
        except Exception as e:
            logger.warning(f"rpc_list_crm_tables falló: {backend_message(e)}")
            raise BackendError(backend_message(e))

        allowed_tables, default_table = sanitize_allowed_tables(
            user_data.allowedTables,
            permitted,
            fallback=settings.default_table,
            desired_default=user_data.defaultTable or settings.default_table,
        )

        try:
            invited = self.repository.invite_user_by_email(user_data.email)
        except Exception as e:
            logger.warning(f"Invitación rechazada para {user_data.email}: {backend_message(e)}")
            raise BackendError(backend_message(e))

        if invited is None:
            raise BackendError("La invitación no devolvió usuario")

        user_id = str(invited.id)
        try:
            self.repository.upsert({
                "user_id": user_id,
                "email": user_data.email,
                "nome": user_data.nome,
                "telefone": user_data.telefone,
                "role": user_data.role,
                "org": user_data.orgs[0] if user_data.orgs else None,
                "orgs": user_data.orgs,
                "allowed_tables": allowed_tables,
                "default_table": default_table,
                "is_active": True,
            })
        except Exception as e:
            logger.error(f"Perfil de {user_data.email} no guardado: {backend_message(e)}")
            raise BackendError(backend_message(e))

        logger.info(
            f"Usuario invitado: {user_data.email} ({user_data.role}) por {requested_by} - "
            f"tablas {allowed_tables}, default {default_table}"
        )
        return CreatedUserResponse(
            user_id=user_id,
            email=user_data.email,
            role=user_data.role,
            allowed_tables=allowed_tables,
            default_table=default_table,
        )

    async def list_users(self, limit: Optional[int] = None) -> List[Profile]:
        try:
            return self.repository.list_profiles(limit or settings.users_list_limit)
        except Exception as e:
            raise BackendError(backend_message(e))

    async def set_active(self, user_id: str, body: ActiveUpdate) -> ActiveStatusResponse:
        """Activar/desactivar un perfil. Sin valor explícito se invierte el actual."""
        try:
            profile = self.repository.find_by_user_id(user_id)
        except Exception as e:
            raise BackendError(backend_message(e))

        if profile is None:
            raise NotFoundError(f"Perfil {user_id} no encontrado")

        is_active = (not profile.is_active) if body.isActive is None else body.isActive

        try:
            self.repository.update(user_id, {"is_active": is_active})
        except Exception as e:
            raise BackendError(backend_message(e))

        logger.info(f"Perfil {user_id} {'activado' if is_active else 'desactivado'}")
        return ActiveStatusResponse(user_id=user_id, is_active=is_active)

    # =====================================================
    # TABLAS Y CLIENTES
    # =====================================================

    async def list_tables(self) -> List[DatasetDescriptor]:
        try:
            descriptors = self.repository.list_crm_tables()
        except Exception as e:
            raise BackendError(backend_message(e))
        return [DatasetDescriptor(**d) for d in descriptors if d.get("table_name")]

    async def list_clientes_for(self, table: str) -> List[str]:
        """Clientes (orgs) distintos de una tabla de la lista blanca"""
        try:
            permitted = permitted_names(self.repository.list_crm_tables())
        except Exception as e:
            raise BackendError(backend_message(e))

        if table not in permitted:
            raise ValidationFailed(f"Tabla fuera de la lista blanca: {table}")

        try:
            return self.repository.distinct_clientes_for(table)
        except Exception as e:
            raise BackendError(backend_message(e))
