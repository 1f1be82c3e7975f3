"""Date extraction for Brazilian receipts and invoices."""

import re
from datetime import date
from typing import Iterator, Optional, Tuple

from .clock import Clock, system_clock

MIN_YEAR = 2020
MAX_YEAR = 2030

MONTHS = (
    ("janeiro", 1),
    ("fevereiro", 2),
    ("março", 3),
    ("abril", 4),
    ("maio", 5),
    ("junho", 6),
    ("julho", 7),
    ("agosto", 8),
    ("setembro", 9),
    ("outubro", 10),
    ("novembro", 11),
    ("dezembro", 12),
)
_MONTH_NUMBERS = dict(MONTHS)

# Priority order matters: numeric D/M/Y, then "D de <mês> de Y", then ISO.
DATE_PATTERNS = (
    ("numeric", re.compile(r"(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})")),
    (
        "written",
        re.compile(
            r"(\d{1,2})\s+de\s+(" + "|".join(name for name, _ in MONTHS) + r")\s+de\s+(\d{4})",
            re.IGNORECASE,
        ),
    ),
    ("iso", re.compile(r"(\d{4})[/-](\d{1,2})[/-](\d{1,2})")),
)


def _split_match(kind: str, match: re.Match) -> Tuple[str, Optional[str], str]:
    """Return (day, month, year) digit strings for a pattern match.

    month is None when a written month name does not fold back to the table.
    """
    if kind == "written":
        day, month_name, year = match.groups()
        month = _MONTH_NUMBERS.get(month_name.casefold())
        return day, (str(month) if month else None), year
    if kind == "iso":
        year, month, day = match.groups()
        return day, month, year
    day, month, year = match.groups()
    if len(year) == 2:
        year = "20" + year
    return day, month, year


def iter_date_candidates(text: str) -> Iterator[Tuple[str, date]]:
    """Yield (pattern name, date) for every calendar-valid match, in priority order."""
    for kind, pattern in DATE_PATTERNS:
        for match in pattern.finditer(text):
            day, month, year = _split_match(kind, match)
            if month is None:
                continue
            try:
                yield kind, date(int(year), int(month), int(day))
            except ValueError:
                continue


def find_date(text: str) -> Optional[date]:
    """First candidate whose year falls in the accepted window, or None."""
    for _, candidate in iter_date_candidates(text or ""):
        if MIN_YEAR <= candidate.year <= MAX_YEAR:
            return candidate
    return None


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def extract_date(text: str, clock: Optional[Clock] = None) -> str:
    """Extract the document date as DD/MM/YYYY.

    Falls back to the clock's current date when nothing valid is found.
    """
    found = find_date(text)
    if found is None:
        found = (clock or system_clock)()
    return format_date(found)
