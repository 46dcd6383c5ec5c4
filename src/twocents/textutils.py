from __future__ import annotations

import re
from typing import List
from urllib.parse import quote_plus

SPACE_RUN_RE = re.compile(r" +")
PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def normalize_query(value: str) -> str:
    """Collapse runs of spaces, lowercase and URL-encode a search query."""
    collapsed = SPACE_RUN_RE.sub(" ", value).lstrip(" ")
    return quote_plus(collapsed.lower())


def split_paragraphs(value: str) -> List[str]:
    """Split plain text on blank lines, dropping empty blocks."""
    blocks = (block.strip() for block in PARAGRAPH_BREAK_RE.split(value))
    return [block for block in blocks if block]
