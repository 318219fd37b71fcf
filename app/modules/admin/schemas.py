# app/modules/admin/schemas.py
from pydantic import BaseModel, Field, validator
from typing import List, Optional

from app.modules.profiles.schemas import Role


class CreateUserRequest(BaseModel):
    """
    Schema para invitar un usuario (solo superadmin).

    `email` y `role` se validan en el service para devolver el mensaje
    del CRM en vez del error genérico de validación.
    """
    email: Optional[str] = Field(None, description="Email del usuario a invitar")
    nome: Optional[str] = None
    telefone: Optional[str] = None
    role: Optional[str] = Field(None, description="superadmin | gestor | admin | cliente")
    orgs: List[str] = Field(default_factory=list, description="Clientes (tenants) visibles")
    allowedTables: Optional[List[str]] = Field(None, description="Tablas permitidas")
    defaultTable: Optional[str] = Field(None, description="Tabla por defecto")

    @validator('email', 'nome', 'telefone', 'role', 'defaultTable')
    def strip_strings(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v or None

    @validator('orgs', pre=True)
    def clean_orgs(cls, v):
        if v is None:
            return []
        if not isinstance(v, list):
            return v
        return [str(o).strip() for o in v if o and str(o).strip()]

    @validator('allowedTables', pre=True)
    def clean_tables(cls, v):
        if isinstance(v, list):
            return [str(t) for t in v if t]
        return v

    def has_valid_role(self) -> bool:
        return self.role in {r.value for r in Role}

    class Config:
        json_schema_extra = {
            "example": {
                "email": "novo@farol.com.br",
                "nome": "João Lima",
                "telefone": "+55 21 98888-0000",
                "role": "cliente",
                "orgs": ["Farol"],
                "allowedTables": ["Farol"],
                "defaultTable": "Farol"
            }
        }


class CreatedUserResponse(BaseModel):
    user_id: str
    email: str
    role: str
    allowed_tables: List[str]
    default_table: str


class ActiveUpdate(BaseModel):
    """Sin `isActive` se invierte el valor actual"""
    isActive: Optional[bool] = None


class ActiveStatusResponse(BaseModel):
    user_id: str
    is_active: bool
