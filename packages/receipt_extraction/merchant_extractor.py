import re
from typing import List, Optional

from .models import MERCHANT_NOT_IDENTIFIED

MAX_MERCHANT_LENGTH = 100
HEADER_LINES = 5

_CNPJ = r"\d{2}[.\s]?\d{3}[.\s]?\d{3}[/\s]?\d{4}[-\s]?\d{2}"


def split_lines(text: str) -> List[str]:
    """Trimmed, non-empty lines of ``text``."""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


class MerchantExtractor:
    def __init__(self):
        # Ordered list of labelled patterns (first non-empty hit wins)
        self.patterns = [
            ("cnpj", re.compile(r"CNPJ[\s:]*" + _CNPJ + r"\s*[-–]\s*([^\n]+)", re.IGNORECASE)),
            ("razao_social", re.compile(r"raz[ãa]o\s+social[\s:]*([^\n]+)", re.IGNORECASE)),
            ("nome_fantasia", re.compile(r"nome\s+fantasia[\s:]*([^\n]+)", re.IGNORECASE)),
            ("estabelecimento", re.compile(r"estabelecimento[\s:]*([^\n]+)", re.IGNORECASE)),
        ]
        self.cnpj_pattern = re.compile(_CNPJ)

    def extract(self, text: str, lines: Optional[List[str]] = None) -> str:
        if not text:
            return MERCHANT_NOT_IDENTIFIED

        # Strategy 1: Labelled fields
        for _, pattern in self.patterns:
            match = pattern.search(text)
            if match:
                name = match.group(1).strip()
                if name:
                    return name[:MAX_MERCHANT_LENGTH]

        # Strategy 2: Header lines, usually the trade name printed on top
        if lines is None:
            lines = split_lines(text)
        header = [line.strip() for line in lines if line.strip()][:HEADER_LINES]
        for line in header:
            cleaned = self.cnpj_pattern.sub("", line).strip()
            if 3 < len(cleaned) < MAX_MERCHANT_LENGTH and not re.fullmatch(r"\d+", cleaned):
                return cleaned

        return MERCHANT_NOT_IDENTIFIED


_default_extractor = MerchantExtractor()


def extract_establishment(text: str, lines: Optional[List[str]] = None) -> str:
    """Merchant name from ``text``, or the "not identified" sentinel."""
    return _default_extractor.extract(text, lines)
