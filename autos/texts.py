# autos/texts.py
from autos.settings import SORT_PRICE_ASC, SORT_PRICE_DESC

PAGE_HEADING = "Autos disponibles"
PAGE_LEAD = "Filtro de automóviles por marca/modelo y/o precio."

COUNT_ONE = "automóvil está siendo mostrado"
COUNT_MANY = "automóviles están siendo mostrados"

NO_RESULTS_MSG = "No se han encontrado automóviles con los filtros aplicados."

SORT_LABELS = {
    SORT_PRICE_ASC: "Menor precio",
    SORT_PRICE_DESC: "Mayor precio",
}

# Respuesta genérica ante errores internos (nunca incluye el detalle)
GENERIC_ERROR_HTML = "<h1>Error interno</h1><p>Algo salió mal. Intentalo más tarde.</p>"
