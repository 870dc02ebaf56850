# tests/test_normalize.py
import pytest

from autos.search.normalize import norm_txt, normalize_catalog_df


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Onix 1.0T LT", "onix 1.0t lt"),
        ("  CRONOS ", "cronos"),
        ("Citroën", "citroen"),
        ("ÁÉÍÓÚ ñ ü", "aeiou n u"),
        ("", ""),
        (None, ""),
    ],
)
def test_norm_txt(raw, expected):
    assert norm_txt(raw) == expected


def test_norm_txt_keeps_inner_spacing():
    # Solo recorta extremos; no colapsa espacios internos
    assert norm_txt(" polo  track ") == "polo  track"


def test_normalize_catalog_df_adds_columns(sample_catalog_df):
    df = normalize_catalog_df(sample_catalog_df.copy())
    assert "_brand_n" in df.columns and "_model_n" in df.columns
    assert df.loc[1, "_brand_n"] == "citroen"
    assert df.loc[4, "_model_n"] == "logan intens"
