# app/modules/profiles/__init__.py
"""
Módulo Profiles - Perfil del usuario autenticado ("me")

- Consultar el perfil propio
- Cambiar la tabla por defecto (solo entre las permitidas)
- Agregar tablas permitidas (superadmin, filtradas por la lista blanca del backend)
- Listar tablas disponibles / permitidas / seleccionada

Arquitectura:
- router.py: Endpoints /me
- service.py: Reglas de negocio (delegan el cruce de listas a app.core.access)
- repository.py: Acceso a `profiles` y rpc_list_crm_tables en Supabase
- schemas.py: Modelos de request/response

El router no se exporta aquí: app.core.auth.dependencies importa el repository
de este paquete.
"""

from .service import ProfilesService
from .repository import ProfilesRepository

__all__ = [
    "ProfilesService",
    "ProfilesRepository"
]
