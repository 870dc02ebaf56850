# tests/conftest.py
import os
import sys
import pandas as pd
import pytest
from fastapi.testclient import TestClient

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


# ---------- TestClient de FastAPI ----------
@pytest.fixture()
def client():
    from autos.main import app
    # Sin re-lanzar excepciones: queremos ver la respuesta 500 genérica
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def sample_catalog_df():
    data = [
        # brand,       model,             price
        ("Chevrolet",  "Onix 1.0T LT",    25_560_900),
        ("Citroën",    "C3 Live Pack",    28_900_000),
        ("Fiat",       "Cronos 1.3 Like", 27_819_000),
        ("Peugeot",    "208 Active",      28_900_000),
        ("Renault",    "Logan Ínténs",    31_200_000),
    ]
    return pd.DataFrame(data, columns=["brand", "model", "price"])
