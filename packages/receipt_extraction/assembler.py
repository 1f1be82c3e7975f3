"""Builds an ExpenseRecord from raw OCR / PDF text.

Every extractor is a pure function of the text, so documents can be
assembled concurrently. The only time-dependent input is the clock used
when no date is printed.
"""

import concurrent.futures
import logging
from typing import List, Optional, Sequence

from .clock import Clock
from .date_extractor import extract_date
from .description_extractor import extract_description
from .merchant_extractor import extract_establishment, split_lines
from .models import EXCERPT_LENGTH, ExpenseRecord
from .payment_method import extract_payment_method
from .rules import categorize_expense
from .value_extractor import extract_value

logger = logging.getLogger(__name__)

DEFAULT_USER = "Desconhecido"


def assemble(text: str, user: str = DEFAULT_USER, clock: Optional[Clock] = None) -> ExpenseRecord:
    """Extract every field of ``text`` into an ExpenseRecord.

    Never raises on malformed input; undetermined fields carry their
    sentinel values. Whether a zero amount rejects the document is up to
    the caller.
    """
    text = text or ""
    lines = split_lines(text)

    merchant = extract_establishment(text, lines)
    description = extract_description(text, lines)

    record = ExpenseRecord(
        date=extract_date(text, clock),
        user=user,
        merchant=merchant,
        amount=extract_value(text),
        category=categorize_expense(merchant, description, text),
        short_description=description,
        payment_method=extract_payment_method(text),
        source_excerpt=text[:EXCERPT_LENGTH],
    )

    logger.debug(
        "Extracted expense: merchant=%r amount=%.2f category=%s",
        record.merchant,
        record.amount,
        record.category,
    )
    return record


# Name used by the original document pipeline
extract_financial_data = assemble


def assemble_many(
    texts: Sequence[str],
    user: str = DEFAULT_USER,
    clock: Optional[Clock] = None,
    max_workers: Optional[int] = None,
) -> List[ExpenseRecord]:
    """Assemble several documents in parallel, preserving input order."""
    if not texts:
        return []

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        records = list(executor.map(lambda text: assemble(text, user, clock), texts))

    logger.info("Assembled %d expense records", len(records))
    return records
