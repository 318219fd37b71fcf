from pydantic import BaseModel, Field
from typing import Optional


class LoginRequest(BaseModel):
    """Schema para login con email y contraseña"""
    email: str = Field(..., min_length=3, description="Email del usuario")
    password: str = Field(..., min_length=1, description="Contraseña del usuario")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "gestor@farol.com.br",
                "password": "senha-segura"
            }
        }


class TokenResponse(BaseModel):
    """Sesión devuelta por Supabase Auth"""
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    user_id: str
    email: Optional[str] = None


class CurrentUser(BaseModel):
    """Identidad del solicitante resuelta desde el access token"""
    id: str
    email: Optional[str] = None
    token: str
