# app/shared/schemas/common.py
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class ApiResponse(BaseModel):
    """Envelope común: { ok, data? , error? }"""
    ok: bool
    data: Optional[Any] = None
    error: Optional[str] = None


def ok_response(data: Any = None, status_code: int = 200) -> JSONResponse:
    content: Dict[str, Any] = {"ok": True}
    if data is not None:
        content["data"] = jsonable_encoder(data)
    return JSONResponse(status_code=status_code, content=content)


def error_response(
    message: str,
    status_code: int,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"ok": False, "error": message},
        headers=headers,
    )


class DatasetDescriptor(BaseModel):
    """Entrada de la lista blanca devuelta por rpc_list_crm_tables"""
    table_name: str
    display_name: Optional[str] = None

    class Config:
        extra = 'ignore'


class PaginatedResponse(BaseModel):
    items: List[Any]
    total: int
    page: int
    page_size: int
    total_pages: int
