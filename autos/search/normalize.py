# autos/search/normalize.py
from __future__ import annotations
from unidecode import unidecode


def norm_txt(s: str) -> str:
    """
    Normaliza texto para comparar: recorta, baja a minúsculas y quita acentos
    y diéresis ("Citroën" -> "citroen").
    """
    s = (s or "").strip().lower()
    return unidecode(s)


def normalize_catalog_df(df, brand_col: str = "brand", model_col: str = "model"):
    """
    Añade columnas normalizadas (_brand_n, _model_n) al DataFrame del catálogo.
    """
    if brand_col in df.columns:
        df["_brand_n"] = df[brand_col].astype(str).map(norm_txt)
    if model_col in df.columns:
        df["_model_n"] = df[model_col].astype(str).map(norm_txt)
    return df
