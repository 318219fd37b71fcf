from fastapi import APIRouter, Depends
from supabase import Client

from app.config.supabase import get_admin_client, get_public_client
from app.core.auth.dependencies import get_current_user
from app.core.auth.schemas import CurrentUser, LoginRequest
from app.core.auth.service import AuthService
from app.core.exceptions import BackendError, backend_message
from app.shared.schemas.common import ApiResponse, ok_response

router = APIRouter()


@router.post("/login", response_model=ApiResponse)
async def login(
    credentials: LoginRequest,
    client: Client = Depends(get_public_client)
):
    """
    Login con email y contraseña contra Supabase Auth

    **Body:**
    ```json
        {
            "email": "user@example.com",
            "password": "senha"
        }
    ```

    **Returns:**
    - access_token para usar como `Authorization: Bearer {token}`
    - refresh_token y expiración
    """
    return ok_response(AuthService.sign_in(client, credentials))


@router.post("/logout", response_model=ApiResponse)
async def logout(
    current_user: CurrentUser = Depends(get_current_user),
    admin: Client = Depends(get_admin_client)
):
    """
    Cerrar sesión: revoca las sesiones del usuario en el backend.

    En el frontend también debes eliminar el token del storage.
    """
    try:
        AuthService.sign_out(admin, current_user.token)
    except Exception as e:
        raise BackendError(backend_message(e))
    return ok_response()
