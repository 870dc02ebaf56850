# autos/settings.py

# Tope aceptado para precio_maximo (inclusive)
MAX_PRICE = 1_000_000_000_000

# Nombres de los query params
PARAM_BRAND_MODEL = "marca_modelo"
PARAM_PRICE_MAX = "precio_maximo"
PARAM_SORT = "ordenar_por"

# Orden permitido (tokens tal como llegan en la URL)
SORT_PRICE_ASC = "precio-menor-mayor"
SORT_PRICE_DESC = "precio-mayor-menor"
SORT_TOKENS = (SORT_PRICE_ASC, SORT_PRICE_DESC)

DEFAULT_FILTERS = {
    PARAM_BRAND_MODEL: "",
    PARAM_PRICE_MAX: None,
    PARAM_SORT: SORT_PRICE_ASC,
}
