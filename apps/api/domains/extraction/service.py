"""Extraction service — runs the receipt engine and applies caller-side rules.

The engine always returns a record with sentinels for anything it could not
determine. Deciding what a sentinel means (reject vs. warn) happens here,
driven by Settings.REJECT_ZERO_AMOUNT.
"""

from typing import Optional

import structlog

from apps.api.core.config import Settings
from apps.api.core.errors import BadRequestError, ExtractionRejectedError, ValidationError
from packages.receipt_extraction import assemble, assemble_many, generate_fingerprint
from packages.receipt_extraction.clock import Clock
from packages.receipt_extraction.models import (
    DESCRIPTION_UNAVAILABLE,
    MERCHANT_NOT_IDENTIFIED,
    PAYMENT_NOT_IDENTIFIED,
    ExpenseRecord,
)

logger = structlog.get_logger()

WARNING_AMOUNT = "amount_not_found"
WARNING_MERCHANT = "merchant_not_identified"
WARNING_DESCRIPTION = "description_unavailable"
WARNING_PAYMENT = "payment_method_not_identified"


def collect_warnings(record: ExpenseRecord) -> list[str]:
    """Name every field that carries its "not determined" sentinel."""
    warnings = []
    if not record.amount_found:
        warnings.append(WARNING_AMOUNT)
    if record.merchant == MERCHANT_NOT_IDENTIFIED:
        warnings.append(WARNING_MERCHANT)
    if record.short_description == DESCRIPTION_UNAVAILABLE:
        warnings.append(WARNING_DESCRIPTION)
    if record.payment_method == PAYMENT_NOT_IDENTIFIED:
        warnings.append(WARNING_PAYMENT)
    return warnings


def _check_text(text: str, settings: Settings) -> None:
    if not text or not text.strip():
        raise BadRequestError("Document text is empty")
    if len(text) > settings.MAX_TEXT_LENGTH:
        raise ValidationError(f"Document text exceeds {settings.MAX_TEXT_LENGTH} characters")


def _to_result(record: ExpenseRecord, settings: Settings) -> dict:
    warnings = collect_warnings(record)
    if settings.REJECT_ZERO_AMOUNT and WARNING_AMOUNT in warnings:
        logger.info("expense_rejected", user=record.user, reason=WARNING_AMOUNT)
        raise ExtractionRejectedError(
            "No amount could be extracted from the document",
            fields=["amount"],
        )
    return {
        "expense": record,
        "fingerprint": generate_fingerprint(record),
        "warnings": warnings,
    }


def extract_expense(
    text: str,
    user: Optional[str],
    settings: Settings,
    clock: Optional[Clock] = None,
) -> dict:
    """Extract a single document into {expense, fingerprint, warnings}."""
    _check_text(text, settings)
    record = assemble(text, user or settings.DEFAULT_USER, clock)
    result = _to_result(record, settings)
    logger.info(
        "expense_extracted",
        user=record.user,
        merchant=record.merchant,
        amount=record.amount,
        category=record.category,
        warnings=result["warnings"],
    )
    return result


def extract_expenses(
    texts: list[str],
    user: Optional[str],
    settings: Settings,
    clock: Optional[Clock] = None,
) -> list[dict]:
    """Extract a batch; any rejected document fails the whole request."""
    if not texts:
        raise BadRequestError("No documents provided")
    for text in texts:
        _check_text(text, settings)

    records = assemble_many(
        texts,
        user or settings.DEFAULT_USER,
        clock,
        max_workers=settings.BATCH_MAX_WORKERS,
    )
    results = [_to_result(record, settings) for record in records]
    logger.info("batch_extracted", count=len(results))
    return results
