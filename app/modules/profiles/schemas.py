from pydantic import BaseModel, Field, validator
from typing import Any, List, Optional
from datetime import datetime
from enum import Enum

from app.shared.schemas.common import DatasetDescriptor


class Role(str, Enum):
    SUPERADMIN = "superadmin"
    GESTOR = "gestor"
    ADMIN = "admin"
    CLIENTE = "cliente"


class Profile(BaseModel):
    """Registro de `profiles` (propiedad del backend)"""
    user_id: str
    email: Optional[str] = None
    nome: Optional[str] = None
    telefone: Optional[str] = None
    role: Optional[str] = None
    org: Optional[str] = None
    orgs: Optional[List[str]] = None
    default_table: Optional[str] = None
    allowed_tables: Optional[List[str]] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    @validator('user_id', pre=True)
    def coerce_user_id(cls, v):
        return str(v) if v is not None else v

    @property
    def allowed_list(self) -> List[str]:
        return list(self.allowed_tables or [])

    class Config:
        extra = 'allow'
        json_schema_extra = {
            "example": {
                "user_id": "5f0c8c1e-8f6a-4a4e-9b52-3c1f7e0b1a2d",
                "email": "gestor@farol.com.br",
                "nome": "Maria Souza",
                "telefone": "+55 11 99999-0000",
                "role": "gestor",
                "org": "Farol",
                "orgs": ["Farol"],
                "default_table": "Farol",
                "allowed_tables": ["Farol"],
                "is_active": True,
                "created_at": "2024-05-01T12:00:00+00:00"
            }
        }


class DefaultTableUpdate(BaseModel):
    """Body de PATCH /me"""
    defaultTable: Optional[Any] = None


class AllowedTablesUpdate(BaseModel):
    """Body de PATCH /me/allowed-tables. `tables` y `tablesToAdd` son alias de `add`."""
    add: Optional[Any] = None
    tables: Optional[Any] = None
    tablesToAdd: Optional[Any] = None
    defaultTable: Optional[Any] = None

    def tables_to_add(self) -> List[str]:
        raw = self.add if self.add is not None else (
            self.tables if self.tables is not None else self.tablesToAdd
        )
        if not isinstance(raw, list):
            return []
        return [str(t) for t in raw if t]


class TableAccess(BaseModel):
    allowed_tables: List[str]
    default_table: Optional[str] = None


class MyTablesResponse(BaseModel):
    tables: List[DatasetDescriptor] = Field(default_factory=list)
    allowed_tables: List[str]
    selected_table: str
