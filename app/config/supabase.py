# app/config/supabase.py
from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import Client, create_client

from app.core.exceptions import AuthenticationError, ServerMisconfigured
from .settings import settings

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache(maxsize=1)
def _admin_client(url: str, key: str) -> Client:
    return create_client(url, key)


def get_admin_client() -> Client:
    """Cliente con service role (ignora RLS). Solo para lógica del servidor."""
    if not settings.has_service_role:
        raise ServerMisconfigured()
    return _admin_client(settings.supabase_url, settings.supabase_service_role_key)


def get_public_client() -> Client:
    """Cliente con anon key, sin sesión. Se crea uno por request."""
    if not settings.has_public_client:
        raise ServerMisconfigured(
            "Faltan variables de entorno (SUPABASE_URL/SUPABASE_ANON_KEY)"
        )
    return create_client(settings.supabase_url, settings.supabase_anon_key)


def get_user_client(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Client:
    """
    Cliente con anon key cuyas consultas PostgREST llevan el token del usuario,
    de modo que las políticas RLS del backend se aplican a lo que lee.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    client = get_public_client()
    client.postgrest.auth(credentials.credentials)
    return client
