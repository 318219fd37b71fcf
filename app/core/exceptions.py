# app/core/exceptions.py
from fastapi import HTTPException, status


class ValidationFailed(HTTPException):
    def __init__(self, detail: str = "Solicitud inválida"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class BackendError(HTTPException):
    """Error devuelto por Supabase, reenviado tal cual al cliente"""

    def __init__(self, detail: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "not_authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Acceso denegado: requiere superadmin"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Recurso no encontrado"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ServerMisconfigured(HTTPException):
    def __init__(
        self,
        detail: str = "Faltan variables de entorno (SUPABASE_URL/SUPABASE_SERVICE_ROLE_KEY)",
    ):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def backend_message(exc: Exception) -> str:
    """Extraer el mensaje legible de un error de PostgREST/GoTrue"""
    message = getattr(exc, "message", None)
    if message:
        return str(message)
    return str(exc) or exc.__class__.__name__
