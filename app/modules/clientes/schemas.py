# app/modules/clientes/schemas.py
from pydantic import BaseModel, Field, validator
from typing import List, Optional

from app.shared.schemas.common import PaginatedResponse


class ClienteFilters(BaseModel):
    """Filtros de la vista `farol_view`"""
    q: Optional[str] = None
    status: Optional[str] = None
    uf: Optional[str] = None
    cidade: Optional[str] = None
    instancia: Optional[str] = None
    banco: Optional[str] = None
    data_de: Optional[str] = None
    data_ate: Optional[str] = None

    @validator('*', pre=True)
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class ClienteRow(BaseModel):
    id: str
    nome: Optional[str] = None
    telefone: Optional[str] = None
    cpf: Optional[str] = None
    status: Optional[str] = None
    saldo: Optional[float] = None
    pago: Optional[str] = None
    horario_da_ultima_resposta: Optional[str] = None
    instancia: Optional[str] = None
    banco_simulado: Optional[str] = None
    uf: Optional[str] = None
    cidade: Optional[str] = None

    @validator('id', 'pago', pre=True)
    def to_text(cls, v):
        return str(v) if v is not None else v

    @validator('saldo', pre=True)
    def to_number(cls, v):
        # PostgREST devuelve numeric como string
        if v is None or v == "":
            return None
        return float(v)


class ClientesPage(PaginatedResponse):
    items: List[ClienteRow] = Field(default_factory=list)
