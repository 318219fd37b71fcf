# app/modules/admin/__init__.py

"""
Módulo Admin - Gestión de usuarios y accesos del CRM

Funcionalidades exclusivas del rol superadmin:

- Invitar usuarios por email y crear su perfil
- Asignar rol, clientes (orgs), tablas permitidas y tabla por defecto
- Listar perfiles y activar/desactivar usuarios
- Consultar la lista blanca de tablas y los clientes de cada tabla

Seguridad:
- El rol del solicitante se lee de `profiles` en cada request (service role)
- Las tablas pedidas se cruzan con la lista blanca del backend antes de guardarse

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos (Supabase: profiles, RPCs, Auth admin)
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as admin_router
from .service import AdminService
from .repository import AdminRepository

__all__ = [
    "admin_router",
    "AdminService",
    "AdminRepository"
]
