# autos/main.py
import logging
import os
import warnings
from contextlib import asynccontextmanager, contextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from autos.config import APP_TITLE, LOG_LEVEL
from autos.search.catalog import get_catalog, search_cars
from autos.search.filters import resolve_filters
from autos.texts import GENERIC_ERROR_HTML
from autos.view import render_listing

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Catálogo inmutable: se carga una vez al arrancar
    get_catalog()
    yield


app = FastAPI(title=APP_TITLE, lifespan=lifespan)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    # Log completo (con traza); al usuario solo el mensaje genérico
    logger.error("Error no controlado en %s %s", request.method, request.url.path, exc_info=exc)
    return HTMLResponse(content=GENERIC_ERROR_HTML, status_code=500)


@contextmanager
def _warnings_as_errors():
    # Los warnings durante el request se tratan como errores
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield


def _run_search(request: Request):
    filters = resolve_filters(request.query_params)
    return filters, search_cars(filters)


@app.get("/", response_class=HTMLResponse)
async def listing(request: Request):
    with _warnings_as_errors():
        filters, cars = _run_search(request)
        content = render_listing(filters, cars)
    return HTMLResponse(content=content)


@app.get("/api/autos")
async def listing_json(request: Request):
    with _warnings_as_errors():
        filters, cars = _run_search(request)
        return {
            "autos": [c.model_dump() for c in cars],
            "count": len(cars),
            "filtros": filters.model_dump(mode="json"),
        }


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("autos.main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
