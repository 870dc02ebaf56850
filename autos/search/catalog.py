# autos/search/catalog.py
from __future__ import annotations
import logging
import os
from typing import List, Optional

import pandas as pd

from autos.config import CATALOG_PATH
from autos.schemas import Car, CarFilters, SortOrder
from autos.search.normalize import norm_txt, normalize_catalog_df

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------------
# Columnas del CSV: brand,model,price
# ------------------------------------------------------------------------------------
COL_BRAND = "brand"
COL_MODEL = "model"
COL_PRICE = "price"

_CATALOG: Optional[pd.DataFrame] = None


# ------------------------------------------------------------------------------------
# Carga y normalización
# ------------------------------------------------------------------------------------
def load_catalog(path: str = CATALOG_PATH) -> pd.DataFrame:
    """
    Carga el CSV del catálogo y añade columnas normalizadas _brand_n / _model_n.
    Exige: brand, model, price (entero, no negativo).
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"No se encontró el catálogo en: {path}")

    df = pd.read_csv(path, dtype={COL_BRAND: str, COL_MODEL: str})

    required = [COL_BRAND, COL_MODEL, COL_PRICE]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"El CSV debe contener las columnas: {missing}")

    if df.empty:
        raise ValueError(f"El catálogo está vacío: {path}")

    prices = pd.to_numeric(df[COL_PRICE], errors="coerce")
    if prices.isna().any() or (prices < 0).any() or (prices % 1 != 0).any():
        raise ValueError("La columna price debe contener enteros no negativos")

    df = df[required].copy()
    df[COL_PRICE] = prices.astype("int64")
    df = normalize_catalog_df(df, brand_col=COL_BRAND, model_col=COL_MODEL)
    df = df.reset_index(drop=True)

    logger.info("Catálogo cargado: %d autos desde %s", len(df), path)
    return df


def get_catalog() -> pd.DataFrame:
    """Catálogo del proceso: se carga una sola vez y no se modifica después."""
    global _CATALOG
    if _CATALOG is None:
        _CATALOG = load_catalog()
    return _CATALOG


# ------------------------------------------------------------------------------------
# Filtro y orden
# ------------------------------------------------------------------------------------
def filter_cars(df: pd.DataFrame, filters: CarFilters) -> pd.DataFrame:
    """
    Devuelve el subconjunto que coincide con marca/modelo Y con el precio máximo.
    Mantiene el orden del catálogo. No modifica `df`.
    """
    if "_brand_n" not in df.columns or "_model_n" not in df.columns:
        df = normalize_catalog_df(df.copy(), brand_col=COL_BRAND, model_col=COL_MODEL)

    mask = pd.Series(True, index=df.index)

    if filters.brand_model != "":
        q = norm_txt(filters.brand_model)
        # Texto que queda vacío al normalizar (emoji, símbolos) no coincide con nada
        if q == "":
            return df.iloc[0:0].copy()
        mask &= (
            df["_brand_n"].str.contains(q, regex=False)
            | df["_model_n"].str.contains(q, regex=False)
        )

    if filters.price_max is not None:
        mask &= df[COL_PRICE] <= filters.price_max

    return df[mask].copy()


def sort_cars(df: pd.DataFrame, sort: SortOrder) -> pd.DataFrame:
    """
    Ordena por precio (asc para PRICE_ASC, desc en otro caso).
    Orden estable: los empates conservan el orden de entrada.
    """
    ascending = sort == SortOrder.PRICE_ASC
    return df.sort_values(by=COL_PRICE, ascending=ascending, kind="stable")


def to_cars(df: pd.DataFrame) -> List[Car]:
    return [
        Car(brand=str(row[COL_BRAND]), model=str(row[COL_MODEL]), price=int(row[COL_PRICE]))
        for _, row in df.iterrows()
    ]


def search_cars(filters: CarFilters, df: Optional[pd.DataFrame] = None) -> List[Car]:
    """Filtro + orden sobre el catálogo (o sobre `df` si se pasa)."""
    source = get_catalog() if df is None else df
    return to_cars(sort_cars(filter_cars(source, filters), filters.sort))
