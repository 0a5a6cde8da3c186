from __future__ import annotations
import re
from typing import List

_RE_DISALLOWED = re.compile(r"[^a-z0-9\s,]")
_RE_SEPARATORS = re.compile(r"[,\s]+")
MIN_TOKEN_LENGTH = 3

def normalize_ingredients(raw: str) -> str:
    """
    Clean free-text ingredient input into a lowercase ", "-joined token list.
    Tokens shorter than three characters are dropped, so the result may be empty.
    """
    text = _RE_DISALLOWED.sub("", (raw or "").lower())
    tokens = [t.strip() for t in _RE_SEPARATORS.split(text)]
    return ", ".join(t for t in tokens if len(t) >= MIN_TOKEN_LENGTH)

def split_ingredients(text: str) -> List[str]:
    return [p.strip() for p in (text or "").split(",") if p.strip()]
