# autos/search/filters.py
from __future__ import annotations
import re
from typing import Any, Mapping, Optional

from autos.schemas import CarFilters, SortOrder
from autos.settings import (
    DEFAULT_FILTERS,
    MAX_PRICE,
    PARAM_BRAND_MODEL,
    PARAM_PRICE_MAX,
    PARAM_SORT,
    SORT_TOKENS,
)

# Entero decimal sin signo, sin separadores ni ceros a la izquierda
_INT_RE = re.compile(r"0|[1-9][0-9]*")


def parse_price_max(raw: Any, max_price: int = MAX_PRICE) -> Optional[int]:
    """
    Devuelve el precio máximo como int si `raw` es un entero exacto dentro de
    [0, max_price]. Cualquier otra cosa ("abc", "-5", "1.5", "1e6") -> None.
    """
    if raw is None:
        return None
    s = str(raw)
    if not _INT_RE.fullmatch(s):
        return None
    # Más dígitos que el tope: fuera de rango sin convertir
    if len(s) > len(str(max_price)):
        return None
    value = int(s)
    if value > max_price:
        return None
    return value


def resolve_filters(query: Mapping[str, Any], max_price: int = MAX_PRICE) -> CarFilters:
    """
    Lee y valida los query params. La entrada inválida no es un error:
    se reemplaza por el valor por defecto y la página se sigue mostrando.
    """
    raw_text = query.get(PARAM_BRAND_MODEL)
    brand_model = str(raw_text).strip() if raw_text is not None else DEFAULT_FILTERS[PARAM_BRAND_MODEL]

    raw_sort = query.get(PARAM_SORT)
    sort = SortOrder(raw_sort) if raw_sort in SORT_TOKENS else SortOrder(DEFAULT_FILTERS[PARAM_SORT])

    return CarFilters(
        brand_model=brand_model,
        price_max=parse_price_max(query.get(PARAM_PRICE_MAX), max_price=max_price),
        sort=sort,
    )
