"""Monetary amount extraction.

Every pattern family feeds a flat list of candidates; the final amount is a
pure reduction over that list. The grand total is assumed to be the largest
plausible number printed on the document.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

MAX_AMOUNT = 100000  # CNPJ/phone fragments parse above this

_NUMBER = r"(\d[\d.]*(?:,\d{2})?)"

VALUE_PATTERNS = (
    ("currency", re.compile(r"R\$\s*" + _NUMBER, re.IGNORECASE)),
    (
        "keyword_total",
        re.compile(
            r"(?:valor\s+total|total|valor\s+a\s+pagar|valor\s+pago)[\s:]*(?:R\$\s*)?" + _NUMBER,
            re.IGNORECASE,
        ),
    ),
    ("grouped", re.compile(r"(\d{1,3}(?:\.\d{3})+,\d{2})")),
    ("decimal_comma", re.compile(r"(\d+,\d{2})")),
)


@dataclass(frozen=True)
class MonetaryCandidate:
    """A parsed amount plus where it came from."""

    amount: float
    matched_text: str
    position: int
    source: str


def normalize_amount(raw: str) -> Optional[float]:
    """Parse a Brazilian-formatted number ("1.234,56") into a float."""
    cleaned = re.sub(r"R\$\s*", "", raw, flags=re.IGNORECASE).strip()
    cleaned = cleaned.replace(".", "").replace(",", ".")
    try:
        return float(cleaned)
    except ValueError:
        return None


def is_plausible(amount: Optional[float]) -> bool:
    return amount is not None and 0 < amount < MAX_AMOUNT


def collect_candidates(text: str) -> List[MonetaryCandidate]:
    """Scan all pattern families and keep every plausible amount."""
    candidates: List[MonetaryCandidate] = []
    if not text:
        return candidates

    for source, pattern in VALUE_PATTERNS:
        for match in pattern.finditer(text):
            amount = normalize_amount(match.group(1))
            if not is_plausible(amount):
                continue
            candidates.append(
                MonetaryCandidate(
                    amount=amount,
                    matched_text=match.group(0),
                    position=match.start(),
                    source=source,
                )
            )
    return candidates


def select_total(candidates: List[MonetaryCandidate]) -> Optional[MonetaryCandidate]:
    """Pick the largest amount; on ties the earliest collected candidate wins."""
    best = None
    for candidate in candidates:
        if best is None or candidate.amount > best.amount:
            best = candidate
    return best


def extract_value(text: str) -> float:
    """Return the document total, or 0.0 when no amount could be found."""
    best = select_total(collect_candidates(text))
    if best is None:
        return 0.0
    return round(best.amount, 2)
