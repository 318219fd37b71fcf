# app/modules/admin/repository.py
from typing import Any, Dict, List

from app.modules.profiles.repository import ProfilesRepository


class AdminRepository(ProfilesRepository):
    """Operaciones de administración global (service role)"""

    def invite_user_by_email(self, email: str):
        """Provisiona la identidad en Supabase Auth y envía el correo de invitación"""
        response = self.client.auth.admin.invite_user_by_email(email)
        return getattr(response, "user", None)

    def distinct_clientes_for(self, table: str) -> List[str]:
        result = self.client.rpc("rpc_distinct_clientes_for", {"_table": table}).execute()
        rows: List[Dict[str, Any]] = list(result.data or [])
        return [row["cliente"] for row in rows if row.get("cliente")]
