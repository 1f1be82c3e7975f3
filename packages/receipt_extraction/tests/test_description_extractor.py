import time

from packages.receipt_extraction.description_extractor import collect_items, extract_description
from packages.receipt_extraction.models import DESCRIPTION_UNAVAILABLE


def test_labelled_items():
    text = "Produto: Arroz 5kg\nProduto: Feijão 1kg"
    assert extract_description(text) == "Arroz 5kg, Feijão 1kg"


def test_itemized_lines():
    text = "2 x Café expresso R$ 7,00\n1 x Pão de queijo R$ 5,50"
    assert extract_description(text) == "Café expresso, Pão de queijo"


def test_labelled_items_come_before_itemized():
    text = "1 x Refrigerante R$ 6,00\nServiço: Taxa de entrega"
    assert collect_items(text) == ["Taxa de entrega", "Refrigerante"]


def test_keeps_first_three_items():
    text = "Item: Arroz\nItem: Feijão\nItem: Açúcar\nItem: Café"
    assert extract_description(text) == "Arroz, Feijão, Açúcar"


def test_description_is_truncated():
    text = "\n".join(f"Produto: {letter * 90}" for letter in "ABC")
    result = extract_description(text)
    assert len(result) == 200
    assert result.startswith("A" * 90 + ", ")


def test_short_items_are_ignored():
    assert extract_description("Item: ok") == DESCRIPTION_UNAVAILABLE


def test_no_items():
    assert extract_description("") == DESCRIPTION_UNAVAILABLE
    assert extract_description("TOTAL R$ 10,00") == DESCRIPTION_UNAVAILABLE


def test_long_itemized_line_is_linear():
    text = "1 x " * 25000
    started = time.perf_counter()
    assert extract_description(text) == DESCRIPTION_UNAVAILABLE
    assert time.perf_counter() - started < 2.0


def test_item_of_99_characters_is_kept():
    name = "B" * 99
    assert extract_description(f"1 x {name} R$ 3,00") == name
    assert extract_description(f"1 x {name}B R$ 3,00") == DESCRIPTION_UNAVAILABLE
