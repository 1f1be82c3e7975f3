"""Short description built from the items printed on a receipt."""

import re
from typing import List, Optional

from .models import DESCRIPTION_UNAVAILABLE

MAX_ITEMS = 3
MAX_DESCRIPTION_LENGTH = 200

ITEM_PATTERNS = (
    # "Descrição: ...", "Item: ...", "Produto ...", "Serviço: ..."
    ("labelled", re.compile(r"(?:descri[çc][ãa]o|item|produto|servi[çc]o)[\s:]*([^\n]+)", re.IGNORECASE)),
    # "2 x Café expresso R$ 7,00"
    ("itemized", re.compile(r"(\d+)\s+x\s+([^\n]{1,99}?)\s+R?\$\s*[\d.,]+", re.IGNORECASE)),
)


def collect_items(text: str) -> List[str]:
    items = []
    for _, pattern in ITEM_PATTERNS:
        for match in pattern.finditer(text):
            item = match.group(match.lastindex).strip()
            if 2 < len(item) < 100:
                items.append(item)
    return items


def extract_description(text: str, lines: Optional[List[str]] = None) -> str:
    # items are matched across the whole text; lines is unused
    if not text:
        return DESCRIPTION_UNAVAILABLE

    items = collect_items(text)
    if not items:
        return DESCRIPTION_UNAVAILABLE
    return ", ".join(items[:MAX_ITEMS])[:MAX_DESCRIPTION_LENGTH]
