# app/modules/profiles/service.py
from supabase import Client
import logging

from app.config.settings import settings
from app.core.access import (
    can_use_table,
    merge_allowed_tables,
    next_default_table,
    permitted_names,
)
from app.core.exceptions import (
    AuthorizationError,
    BackendError,
    ValidationFailed,
    backend_message,
)
from app.shared.schemas.common import DatasetDescriptor
from .repository import ProfilesRepository
from .schemas import AllowedTablesUpdate, DefaultTableUpdate, MyTablesResponse, Profile, TableAccess

logger = logging.getLogger(__name__)


class ProfilesService:
    def __init__(self, admin: Client):
        self.admin = admin
        self.repository = ProfilesRepository(admin)

    async def update_default_table(self, user_id: str, body: DefaultTableUpdate) -> TableAccess:
        """Cambiar la tabla por defecto del usuario, solo entre sus tablas permitidas"""
        table = body.defaultTable
        if not table or not isinstance(table, str):
            raise ValidationFailed("defaultTable ausente o inválido")

        try:
            profile = self.repository.get_by_user_id(user_id)
        except Exception as e:
            raise BackendError(backend_message(e))

        if not can_use_table(table, profile.allowed_list):
            raise AuthorizationError("Tabla no permitida para este usuario")

        try:
            self.repository.update(user_id, {"default_table": table})
        except Exception as e:
            raise BackendError(backend_message(e))

        logger.info(f"Tabla por defecto de {user_id} -> {table}")
        return TableAccess(allowed_tables=profile.allowed_list, default_table=table)

    async def grant_allowed_tables(self, profile: Profile, body: AllowedTablesUpdate) -> TableAccess:
        """
        Agregar tablas a `allowed_tables` del propio superadmin.

        Solo se agregan las que están en la lista blanca del backend; la tabla
        por defecto cambia únicamente si la pedida quedó dentro del resultado.
        """
        add = body.tables_to_add()
        if not add:
            raise ValidationFailed("Informe add: string[] con las tablas a agregar")

        try:
            permitted = permitted_names(self.repository.list_crm_tables())
        except Exception as e:
            raise BackendError(backend_message(e))

        merged = merge_allowed_tables(profile.allowed_tables, add, permitted)
        next_default = next_default_table(profile.default_table, body.defaultTable, merged)

        values = {"allowed_tables": merged}
        if next_default and next_default in merged:
            values["default_table"] = next_default

        try:
            self.repository.update(profile.user_id, values)
        except Exception as e:
            raise BackendError(backend_message(e))

        logger.info(f"Acceso a tablas de {profile.user_id}: {merged} (default: {next_default})")
        return TableAccess(allowed_tables=merged, default_table=next_default)

    async def get_my_tables(self, user_id: str) -> MyTablesResponse:
        """Lista blanca completa + tablas permitidas y seleccionada del usuario"""
        try:
            profile = self.repository.get_by_user_id(user_id)
            descriptors = self.repository.list_crm_tables()
        except Exception as e:
            raise BackendError(backend_message(e))

        allowed = profile.allowed_list or [profile.default_table or settings.default_table]
        selected = profile.default_table or allowed[0]

        return MyTablesResponse(
            tables=[DatasetDescriptor(**d) for d in descriptors if d.get("table_name")],
            allowed_tables=allowed,
            selected_table=selected,
        )
