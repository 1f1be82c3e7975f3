"""Tests for the extraction endpoints."""

from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.api.core.config import Settings
from apps.api.core.errors import register_error_handlers
from apps.api.deps import get_app_settings, get_clock
from apps.api.domains.extraction.router import router
from packages.receipt_extraction.clock import fixed_clock

RECEIPT = (
    "SUPERMERCADO EXTRA\n"
    "CNPJ 12.345.678/0001-90\n"
    "...\n"
    "TOTAL: R$ 152,30\n"
    "01/03/2024\n"
    "Forma de pagamento: PIX"
)


@pytest.fixture
def settings():
    return Settings(_env_file=None, REJECT_ZERO_AMOUNT=False, MAX_TEXT_LENGTH=2000)


@pytest.fixture
def app(settings):
    """Create a test app with the extraction router and a pinned clock."""
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(router, prefix="/api/v1")
    app.dependency_overrides[get_app_settings] = lambda: settings
    app.dependency_overrides[get_clock] = lambda: fixed_clock(date(2025, 6, 1))
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


class TestExtractSingle:
    def test_extracts_supermarket_receipt(self, client):
        response = client.post("/api/v1/extraction/expense", json={"text": RECEIPT, "user": "Ana"})
        assert response.status_code == 200

        data = response.json()
        expense = data["expense"]
        assert expense["date"] == "01/03/2024"
        assert expense["user"] == "Ana"
        assert expense["merchant"] == "SUPERMERCADO EXTRA"
        assert expense["amount"] == 152.30
        assert expense["category"] == "Alimentação"
        assert expense["payment_method"] == "PIX"
        assert len(data["fingerprint"]) == 64
        assert data["warnings"] == ["description_unavailable"]

    def test_default_user_from_settings(self, client):
        response = client.post("/api/v1/extraction/expense", json={"text": RECEIPT})
        assert response.json()["expense"]["user"] == "API User"

    def test_zero_amount_is_a_warning_by_default(self, client):
        response = client.post("/api/v1/extraction/expense", json={"text": "papel em branco"})
        assert response.status_code == 200

        data = response.json()
        assert data["expense"]["amount"] == 0.0
        assert data["expense"]["date"] == "01/06/2025"
        assert "amount_not_found" in data["warnings"]
        assert "payment_method_not_identified" in data["warnings"]

    def test_zero_amount_rejected_when_configured(self, app, client):
        strict = Settings(_env_file=None, REJECT_ZERO_AMOUNT=True)
        app.dependency_overrides[get_app_settings] = lambda: strict

        response = client.post("/api/v1/extraction/expense", json={"text": "papel em branco"})
        assert response.status_code == 422
        body = response.json()
        assert body["type"] == "/problems/extraction-rejected"
        assert body["fields"] == ["amount"]

    def test_empty_text_is_bad_request(self, client):
        response = client.post("/api/v1/extraction/expense", json={"text": "   "})
        assert response.status_code == 400
        assert response.json()["detail"] == "Document text is empty"

    def test_text_too_long(self, client):
        response = client.post("/api/v1/extraction/expense", json={"text": "a" * 2001})
        assert response.status_code == 422

    def test_missing_text_field(self, client):
        response = client.post("/api/v1/extraction/expense", json={"user": "Ana"})
        assert response.status_code == 422

    def test_same_document_same_fingerprint(self, client):
        first = client.post("/api/v1/extraction/expense", json={"text": RECEIPT, "user": "Ana"}).json()
        second = client.post("/api/v1/extraction/expense", json={"text": RECEIPT, "user": "Ana"}).json()
        assert first == second


class TestExtractBatch:
    def test_batch_preserves_order(self, client):
        texts = [RECEIPT, "DROGASIL\nTOTAL R$ 32,90\nDébito"]
        response = client.post("/api/v1/extraction/expense/batch", json={"texts": texts, "user": "Ana"})
        assert response.status_code == 200

        data = response.json()
        assert data["count"] == 2
        assert [e["expense"]["merchant"] for e in data["expenses"]] == ["SUPERMERCADO EXTRA", "DROGASIL"]
        assert data["expenses"][1]["expense"]["category"] == "Saúde"

    def test_empty_batch(self, client):
        response = client.post("/api/v1/extraction/expense/batch", json={"texts": []})
        assert response.status_code == 400

    def test_batch_with_blank_document(self, client):
        response = client.post("/api/v1/extraction/expense/batch", json={"texts": [RECEIPT, ""]})
        assert response.status_code == 400
