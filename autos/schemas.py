from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from autos.settings import MAX_PRICE, SORT_PRICE_ASC, SORT_PRICE_DESC


class SortOrder(str, Enum):
    PRICE_ASC = SORT_PRICE_ASC
    PRICE_DESC = SORT_PRICE_DESC


class Car(BaseModel):
    model_config = ConfigDict(frozen=True)

    brand: str
    model: str
    price: int = Field(..., ge=0, description="Precio en pesos enteros (ARS)")


class CarFilters(BaseModel):
    brand_model: str = ""
    price_max: Optional[int] = Field(None, ge=0, le=MAX_PRICE)
    sort: SortOrder = SortOrder.PRICE_ASC
