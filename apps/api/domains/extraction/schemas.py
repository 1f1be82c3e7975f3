"""Pydantic schemas for the extraction domain."""

from pydantic import BaseModel, Field
from typing import Optional

from packages.receipt_extraction.models import ExpenseRecord


class ExtractRequest(BaseModel):
    """Text already produced by an OCR or PDF backend."""

    text: str
    user: Optional[str] = None


class BatchExtractRequest(BaseModel):
    """Several documents belonging to the same user."""

    texts: list[str] = Field(..., description="One entry per document")
    user: Optional[str] = None


class ExtractResponse(BaseModel):
    """Extracted record plus gateway annotations."""

    expense: ExpenseRecord
    fingerprint: str
    warnings: list[str] = Field(default_factory=list)


class BatchExtractResponse(BaseModel):
    expenses: list[ExtractResponse]
    count: int
