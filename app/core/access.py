# app/core/access.py
"""
Reglas de acceso a tablas (datasets) del CRM.

La lista blanca de tablas la define el backend (rpc_list_crm_tables); aquí solo
se cruza lo que pide el cliente contra esa lista antes de guardarlo en
`profiles.allowed_tables` / `profiles.default_table`.
"""
from typing import Any, Dict, Iterable, List, Optional, Tuple


def _unique(names: Iterable[Any]) -> List[str]:
    seen = set()
    result = []
    for name in names:
        if not name:
            continue
        name = str(name)
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


def permitted_names(descriptors: Optional[Iterable[Dict[str, Any]]]) -> List[str]:
    """Nombres de tabla de la lista blanca, en el orden del backend"""
    return _unique(d.get("table_name") for d in (descriptors or []))


def sanitize_allowed_tables(
    requested: Optional[Iterable[Any]],
    permitted: List[str],
    fallback: str,
    desired_default: Optional[str] = None,
) -> Tuple[List[str], str]:
    """
    Intersección R ∩ P preservando el orden pedido.

    Si la intersección queda vacía se usa el primer nombre permitido, o
    `fallback` cuando el backend no devolvió ninguno. El default devuelto
    siempre pertenece a la lista resultante.
    """
    wanted = _unique(requested) if requested is not None else [fallback]
    allowed_set = set(permitted)
    allowed = [t for t in wanted if t in allowed_set]

    if not allowed:
        allowed = [permitted[0] if permitted else fallback]

    return allowed, choose_default(desired_default, allowed)


def choose_default(desired: Optional[str], allowed: List[str]) -> str:
    if desired and desired in allowed:
        return desired
    return allowed[0]


def merge_allowed_tables(
    current: Optional[Iterable[Any]],
    add: Iterable[Any],
    permitted: List[str],
) -> List[str]:
    """Unión de las tablas actuales con las nuevas que estén en la lista blanca"""
    allowed_set = set(permitted)
    additions = [t for t in _unique(add) if t in allowed_set]
    return _unique(list(current or []) + additions)


def next_default_table(
    current_default: Optional[str],
    desired: Optional[str],
    merged: List[str],
) -> Optional[str]:
    if isinstance(desired, str) and desired in merged:
        return desired
    return current_default


def can_use_table(table: str, allowed: Optional[List[str]]) -> bool:
    # Sin lista registrada no hay restricción
    if not allowed:
        return True
    return table in allowed
