"""Extraction router — turn OCR / PDF text into expense records.

Text acquisition (OCR, PDF parsing) happens upstream; these endpoints only
receive the resulting text.
"""

from fastapi import APIRouter, Depends

from apps.api.core.config import Settings
from apps.api.deps import get_app_settings, get_clock
from apps.api.domains.extraction.schemas import (
    BatchExtractRequest,
    BatchExtractResponse,
    ExtractRequest,
    ExtractResponse,
)
from apps.api.domains.extraction.service import extract_expense, extract_expenses
from packages.receipt_extraction.clock import Clock

router = APIRouter(prefix="/extraction", tags=["extraction"])


@router.post("/expense", response_model=ExtractResponse)
def extract_single(
    request: ExtractRequest,
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_clock),
):
    """Extract one document.

    A zero amount is a warning unless REJECT_ZERO_AMOUNT is set, in which
    case the document is rejected with a 422 problem detail.
    """
    result = extract_expense(request.text, request.user, settings, clock)
    return ExtractResponse(**result)


@router.post("/expense/batch", response_model=BatchExtractResponse)
def extract_batch(
    request: BatchExtractRequest,
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_clock),
):
    """Extract several documents in parallel, preserving request order."""
    results = extract_expenses(request.texts, request.user, settings, clock)
    return BatchExtractResponse(
        expenses=[ExtractResponse(**r) for r in results],
        count=len(results),
    )
