# app/api/router.py
from fastapi import APIRouter

from app.api.auth import router as auth_router
from app.modules.profiles.router import router as profiles_router
from app.modules.clientes.router import router as clientes_router
from app.modules.dashboard.router import router as dashboard_router
from app.modules.admin import admin_router


# Router principal de la API
api_router = APIRouter()


@api_router.get("/ping", tags=["health"])
async def ping():
    return {"ok": True, "ping": "pong"}


api_router.include_router(auth_router, prefix="/auth", tags=["authentication"])

api_router.include_router(
    profiles_router,
    prefix="/me",
    tags=["Me - Perfil"]
)

api_router.include_router(
    clientes_router,
    prefix="/clientes",
    tags=["Clientes"]
)

api_router.include_router(
    dashboard_router,
    prefix="/dashboard",
    tags=["Dashboard"]
)

api_router.include_router(
    admin_router,
    prefix="/admin",
    tags=["Admin - Superadmin"]
)
