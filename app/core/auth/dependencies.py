from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials
from supabase import Client
from typing import List, Optional
import logging

from app.config.settings import settings
from app.config.supabase import bearer_scheme, get_admin_client, get_public_client
from app.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BackendError,
    backend_message,
)
from app.modules.profiles.repository import ProfilesRepository
from app.modules.profiles.schemas import Profile
from .schemas import CurrentUser
from .service import AuthService

logger = logging.getLogger(__name__)


def _verification_client() -> Optional[Client]:
    if settings.supabase_jwt_secret:
        return None
    if settings.has_service_role:
        return get_admin_client()
    return get_public_client()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    """Obtener usuario actual desde el token Bearer"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    user = AuthService.verify_token(credentials.credentials, _verification_client())
    if user is None:
        raise AuthenticationError()

    return user


async def get_current_profile(
    current_user: CurrentUser = Depends(get_current_user),
    admin: Client = Depends(get_admin_client),
) -> Profile:
    """Perfil completo del solicitante, leído con service role"""
    try:
        return ProfilesRepository(admin).get_by_user_id(current_user.id)
    except Exception as e:
        raise BackendError(backend_message(e))


def require_roles(allowed_roles: List[str]):
    """Factory para crear dependency que requiere roles específicos"""
    def role_checker(
        current_user: CurrentUser = Depends(get_current_user),
        admin: Client = Depends(get_admin_client),
    ) -> Profile:
        # El rol se consulta siempre en el momento, nunca desde el token
        try:
            profile = ProfilesRepository(admin).get_by_user_id(current_user.id)
        except Exception as e:
            logger.warning(f"No se pudo cargar el perfil de {current_user.id}: {backend_message(e)}")
            raise AuthorizationError("Fallo al verificar el perfil del solicitante")

        if profile.role not in allowed_roles:
            raise AuthorizationError(
                "Acceso denegado: requiere " + " o ".join(allowed_roles)
            )
        return profile
    return role_checker


def get_superadmin_profile(
    profile: Profile = Depends(require_roles([settings.superadmin_role])),
) -> Profile:
    """Dependency para superadmin"""
    return profile
