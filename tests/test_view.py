# tests/test_view.py
from autos.schemas import Car, CarFilters, SortOrder
from autos.settings import SORT_TOKENS
from autos.texts import SORT_LABELS
from autos.view import count_label, e, fmt_ars, render_listing


def test_fmt_ars():
    assert fmt_ars(25_560_900) == "$25.560.900"
    assert fmt_ars(185_000_000) == "$185.000.000"
    assert fmt_ars(999) == "$999"
    assert fmt_ars(0) == "$0"


def test_count_label_singular_plural():
    assert count_label(1) == "automóvil está siendo mostrado"
    assert count_label(0) == "automóviles están siendo mostrados"
    assert count_label(2) == "automóviles están siendo mostrados"


def test_escape_covers_quotes():
    assert e('<a href="x">\'&') == "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;"


def test_render_prefills_form():
    html = render_listing(
        CarFilters(brand_model="Toyota", price_max=30_000_000, sort=SortOrder.PRICE_DESC),
        [Car(brand="Toyota", model="Yaris Hatchback XS", price=26_721_000)],
    )
    assert 'value="Toyota"' in html
    assert 'value="$30.000.000"' in html
    assert 'name="precio_maximo" value="30000000"' in html
    assert '<option value="precio-mayor-menor" selected>' in html
    assert '<option value="precio-menor-mayor">' in html
    assert "<td class=\"text-end text-nowrap\">$26.721.000</td>" in html


def test_render_escapes_user_text():
    html = render_listing(CarFilters(brand_model='"><script>alert(1)</script>'), [])
    assert "<script>alert(1)</script>" not in html
    assert "&quot;&gt;&lt;script&gt;" in html


def test_render_no_results():
    html = render_listing(CarFilters(brand_model="Tesla"), [])
    assert "No se han encontrado automóviles" in html
    assert "<table" not in html
    assert ">0</span> automóviles están siendo mostrados." in html


def test_sort_labels_cover_sort_tokens():
    assert tuple(SORT_LABELS) == SORT_TOKENS
