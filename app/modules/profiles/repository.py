# app/modules/profiles/repository.py
from supabase import Client
from typing import Any, Dict, List, Optional

from .schemas import Profile

PROFILE_COLUMNS = "user_id,email,nome,telefone,role,org,orgs,default_table,allowed_tables,is_active,created_at"


class ProfilesRepository:
    """Acceso a la tabla `profiles` y a la lista blanca de tablas"""

    def __init__(self, client: Client):
        self.client = client

    def get_by_user_id(self, user_id: str) -> Profile:
        """Perfil por user_id. PostgREST falla si no hay exactamente una fila."""
        result = (
            self.client.table("profiles")
            .select("*")
            .eq("user_id", user_id)
            .single()
            .execute()
        )
        return Profile(**result.data)

    def find_by_user_id(self, user_id: str) -> Optional[Profile]:
        result = (
            self.client.table("profiles")
            .select(PROFILE_COLUMNS)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        rows = result.data or []
        return Profile(**rows[0]) if rows else None

    def find_by_email(self, email: str) -> Optional[Profile]:
        result = (
            self.client.table("profiles")
            .select(PROFILE_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        rows = result.data or []
        return Profile(**rows[0]) if rows else None

    def list_profiles(self, limit: int) -> List[Profile]:
        result = (
            self.client.table("profiles")
            .select(PROFILE_COLUMNS)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [Profile(**row) for row in (result.data or [])]

    def update(self, user_id: str, values: Dict[str, Any]) -> None:
        self.client.table("profiles").update(values).eq("user_id", user_id).execute()

    def upsert(self, values: Dict[str, Any]) -> None:
        self.client.table("profiles").upsert(values, on_conflict="user_id").execute()

    def list_crm_tables(self) -> List[Dict[str, Any]]:
        """Lista blanca de tablas del CRM (rpc_list_crm_tables)"""
        result = self.client.rpc("rpc_list_crm_tables", {}).execute()
        return list(result.data or [])
