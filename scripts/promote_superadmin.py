#!/usr/bin/env python3
"""
Promover un perfil existente a superadmin (bootstrap del primer administrador)

Uso: python scripts/promote_superadmin.py usuario@dominio.com

Requiere SUPABASE_URL y SUPABASE_SERVICE_ROLE_KEY en .env
"""
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from app.config.settings import settings
from app.config.supabase import get_admin_client
from app.modules.profiles.repository import ProfilesRepository


def promote(email: str) -> bool:
    if not settings.has_service_role:
        print("❌ ERROR: Faltan SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY en .env")
        return False

    repository = ProfilesRepository(get_admin_client())
    profile = repository.find_by_email(email)
    if profile is None:
        print(f"❌ No existe perfil para {email}. Invita primero al usuario.")
        return False

    if profile.role == settings.superadmin_role:
        print(f"✅ {email} ya es {settings.superadmin_role}")
        return True

    repository.update(profile.user_id, {"role": settings.superadmin_role, "is_active": True})
    print(f"✅ {email}: {profile.role} -> {settings.superadmin_role}")
    return True


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(0 if promote(sys.argv[1].strip()) else 1)
