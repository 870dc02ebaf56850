# autos/config.py
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

CATALOG_PATH = os.getenv("CATALOG_PATH") or os.path.join(BASE_DIR, "data", "catalog.csv")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
APP_TITLE = os.getenv("APP_TITLE", "ComunidAuto | Autos disponibles")
