# autos/view.py
from html import escape
from typing import List

from autos.config import APP_TITLE
from autos.schemas import Car, CarFilters
from autos.texts import (
    COUNT_MANY,
    COUNT_ONE,
    NO_RESULTS_MSG,
    PAGE_HEADING,
    PAGE_LEAD,
    SORT_LABELS,
)

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.8/dist/css/bootstrap.min.css"
BOOTSTRAP_JS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.8/dist/js/bootstrap.bundle.min.js"


def e(value) -> str:
    """Escapa texto para HTML (incluye comillas simples y dobles)."""
    return escape(str(value), quote=True)


def fmt_ars(amount: int) -> str:
    """Pesos argentinos sin decimales: 25560900 -> $25.560.900"""
    return "$" + f"{int(amount):,}".replace(",", ".")


def count_label(total: int) -> str:
    return COUNT_ONE if total == 1 else COUNT_MANY


# ---------- Formulario ----------
def _form(filters: CarFilters) -> str:
    price_visible = e(fmt_ars(filters.price_max)) if filters.price_max is not None else ""
    price_hidden = str(filters.price_max) if filters.price_max is not None else ""
    return f"""
                <form id="filter" method="GET" class="row g-3 mb-3">
                    <div class="col-12 col-md-6">
                        <label for="marca_modelo_input" class="form-label">Buscar por marca o modelo</label>
                        <input type="search" name="marca_modelo" id="marca_modelo_input" class="form-control" autocomplete="off" spellcheck="false" value="{e(filters.brand_model)}">
                    </div>
                    <div class="col-12 col-md-4">
                        <label for="precio_maximo_input" class="form-label">Precio máximo (ARS)</label>
                        <input type="search" id="precio_maximo_input" class="form-control" placeholder="Ej: 10.000.000" inputmode="numeric" value="{price_visible}">
                        <input type="hidden" id="precio_maximo_hidden" name="precio_maximo" value="{price_hidden}">
                    </div>
                    <div class="col-12 col-md-2 d-grid g-2">
                        <button type="submit" class="btn btn-primary btn-sm">Aplicar filtros</button>
                        <a href="/" class="btn btn-secondary btn-sm mt-2">Limpiar</a>
                    </div>
                </form>"""


def _sort_select(filters: CarFilters) -> str:
    options = []
    for token, label in SORT_LABELS.items():
        selected = " selected" if filters.sort.value == token else ""
        options.append(f'<option value="{e(token)}"{selected}>{e(label)}</option>')
    return (
        '<select name="ordenar_por" id="ordenar_por" form="filter" class="form-select" '
        'onchange="this.form.requestSubmit()">' + "".join(options) + "</select>"
    )


def _results(cars: List[Car]) -> str:
    if not cars:
        return f'<div class="alert alert-warning" role="alert">{e(NO_RESULTS_MSG)}</div>'

    rows = []
    for car in cars:
        rows.append(
            "<tr>"
            f'<td class="text-nowrap">{e(car.brand)}</td>'
            f'<td class="text-nowrap">{e(car.model)}</td>'
            f'<td class="text-end text-nowrap">{e(fmt_ars(car.price))}</td>'
            "</tr>"
        )
    return (
        '<div class="table-responsive"><table class="table table-striped table-hover">'
        "<caption>Listado de vehículos</caption>"
        '<thead><tr><th class="text-nowrap" scope="col">Marca</th>'
        '<th class="text-nowrap" scope="col">Modelo</th>'
        '<th class="text-nowrap text-end" scope="col">Precio</th></tr></thead>'
        "<tbody>" + "".join(rows) + "</tbody></table></div>"
    )


# Mantiene el input visible formateado (es-AR) y el hidden con el entero
_PRICE_SYNC_JS = """
    <script>
        (() => {
            const visible = document.getElementById('precio_maximo_input');
            const hidden  = document.getElementById('precio_maximo_hidden');
            const fmt = new Intl.NumberFormat('es-AR');
            const onlyDigits = s => s.replace(/\\D+/g, '');
            const sync = () => {
                const digits = onlyDigits(visible.value);
                hidden.value = digits ? String(parseInt(digits, 10)) : '';
                visible.value = digits ? fmt.format(parseInt(digits, 10)) : '';
            };
            visible.addEventListener('input', sync);
            visible.addEventListener('blur', sync);
            sync();
        })();
    </script>"""


def render_listing(filters: CarFilters, cars: List[Car]) -> str:
    """
    Página completa: formulario con los filtros resueltos, contador
    (singular/plural) y la tabla o el aviso de "sin resultados".
    """
    total = len(cars)
    return f"""<!DOCTYPE html>
<html lang="es">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{e(APP_TITLE)}</title>
    <link href="{BOOTSTRAP_CSS}" rel="stylesheet">
</head>
<body>
    <main class="container p-4">
        <header class="mb-3">
            <h1 class="h3">{e(PAGE_HEADING)}</h1>
            <p class="text-body-secondary">{e(PAGE_LEAD)}</p>
        </header>
        <section class="card">
            <div class="card-body">{_form(filters)}
                <div class="row g-3 mb-3 align-items-end">
                    <p class="col-12 col-md-8">
                        <span class="badge rounded-pill text-bg-primary">{total}</span> {count_label(total)}.
                    </p>
                    <div class="col-12 col-md-4">
                        <label for="ordenar_por" class="form-label">Ordenar por</label>
                        {_sort_select(filters)}
                    </div>
                </div>
                {_results(cars)}
            </div>
        </section>
    </main>{_PRICE_SYNC_JS}
    <script src="{BOOTSTRAP_JS}"></script>
</body>
</html>
"""
