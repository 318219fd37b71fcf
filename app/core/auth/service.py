# app/core/auth/service.py
import logging
from typing import Any, Dict, Optional

from jose import jwt, JWTError
from supabase import Client

from app.config.settings import settings
from app.core.exceptions import AuthenticationError, backend_message
from .schemas import CurrentUser, LoginRequest, TokenResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Servicio de autenticación contra Supabase Auth (GoTrue)"""

    @staticmethod
    def decode_token(token: str) -> Optional[Dict[str, Any]]:
        """Verificar y decodificar un access token firmado con el JWT secret del proyecto"""
        try:
            return jwt.decode(
                token,
                settings.supabase_jwt_secret,
                algorithms=[settings.jwt_algorithm],
                audience=settings.jwt_audience,
            )
        except JWTError:
            return None

    @staticmethod
    def verify_token(token: str, client: Optional[Client] = None) -> Optional[CurrentUser]:
        """
        Resolver el usuario de un access token.

        Con `SUPABASE_JWT_SECRET` configurado el token se valida localmente;
        si no, se consulta al backend con `auth.get_user`.
        """
        if not token:
            return None

        if settings.supabase_jwt_secret:
            payload = AuthService.decode_token(token)
            if payload is None or not payload.get("sub"):
                return None
            return CurrentUser(id=payload["sub"], email=payload.get("email"), token=token)

        if client is None:
            return None

        try:
            response = client.auth.get_user(token)
        except Exception as e:
            logger.info(f"Token rechazado por el backend: {backend_message(e)}")
            return None

        user = getattr(response, "user", None)
        if user is None:
            return None
        return CurrentUser(id=str(user.id), email=user.email, token=token)

    @staticmethod
    def sign_in(client: Client, credentials: LoginRequest) -> TokenResponse:
        try:
            response = client.auth.sign_in_with_password(
                {"email": credentials.email, "password": credentials.password}
            )
        except Exception as e:
            raise AuthenticationError(backend_message(e))

        session = getattr(response, "session", None)
        if session is None or response.user is None:
            raise AuthenticationError("Email o contraseña incorrectos")

        logger.info(f"Login exitoso: {response.user.email}")
        return TokenResponse(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_in=session.expires_in,
            user_id=str(response.user.id),
            email=response.user.email,
        )

    @staticmethod
    def sign_out(admin: Client, token: str) -> None:
        """Revocar las sesiones del usuario dueño del token"""
        admin.auth.admin.sign_out(token)
