from __future__ import annotations
import re
from typing import List

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_WS = re.compile(r"\s+")


def compact(s: str) -> str:
    """'Acme-Corp™' -> 'acmecorp'. Les caractères non ASCII sont retirés, pas translittérés."""
    return _NON_ALNUM.sub("", (s or "").lower())


def brand_words(brand: str) -> List[str]:
    return [w for w in _WS.split(brand.strip().lower()) if w]


def loose_pattern(brand: str) -> re.Pattern:
    """Les mots de la marque, dans l'ordre, séparés par 0..n espaces / tirets / underscores."""
    return re.compile(r"[\s\-_]*".join(re.escape(w) for w in brand_words(brand)), re.IGNORECASE)
