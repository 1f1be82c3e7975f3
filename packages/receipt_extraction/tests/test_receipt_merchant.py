import pytest

from packages.receipt_extraction.merchant_extractor import (
    MerchantExtractor,
    extract_establishment,
    split_lines,
)
from packages.receipt_extraction.models import MERCHANT_NOT_IDENTIFIED


@pytest.fixture
def extractor():
    return MerchantExtractor()


def test_name_after_cnpj(extractor):
    text = "CNPJ: 12.345.678/0001-90 - PADARIA PÃO QUENTE LTDA\nRua das Flores, 10"
    assert extractor.extract(text) == "PADARIA PÃO QUENTE LTDA"


def test_labelled_fields(extractor):
    assert extractor.extract("Razão Social: Farmácia Popular Ltda\nTotal") == "Farmácia Popular Ltda"
    assert extractor.extract("NOME FANTASIA: Café Central") == "Café Central"
    assert extractor.extract("Estabelecimento: Posto Shell Centro") == "Posto Shell Centro"


def test_label_priority_ignores_position(extractor):
    text = "Nome fantasia: Mercado Bom Preço\nRazão social: BOM PRECO COMERCIO LTDA"
    assert extractor.extract(text) == "BOM PRECO COMERCIO LTDA"


def test_labelled_name_is_truncated(extractor):
    name = "A" * 150
    assert extractor.extract(f"Razão social: {name}") == "A" * 100


def test_fallback_to_header_lines(extractor):
    text = "12345\n12.345.678/0001-90\nLOJA DO ZÉ\nTOTAL R$ 10,00"
    assert extractor.extract(text) == "LOJA DO ZÉ"


def test_fallback_strips_cnpj_from_line(extractor):
    assert extractor.extract("ACME COMERCIO 12.345.678/0001-90") == "ACME COMERCIO"


def test_fallback_only_looks_at_first_five_lines(extractor):
    text = "1\n22\n333\n4444\n55555\nSUPERMERCADO TARDIO"
    assert extractor.extract(text) == MERCHANT_NOT_IDENTIFIED


def test_short_and_numeric_lines_are_rejected(extractor):
    assert extractor.extract("abc\n123456\n  \n") == MERCHANT_NOT_IDENTIFIED


def test_empty_input():
    assert extract_establishment("") == MERCHANT_NOT_IDENTIFIED
    assert extract_establishment(None) == MERCHANT_NOT_IDENTIFIED


def test_explicit_lines_are_used():
    lines = ["", "   ", "MERCADINHO DA ESQUINA"]
    assert extract_establishment("qualquer texto", lines) == "MERCADINHO DA ESQUINA"


def test_split_lines():
    assert split_lines("  a \n\n b\n") == ["a", "b"]
    assert split_lines("") == []
