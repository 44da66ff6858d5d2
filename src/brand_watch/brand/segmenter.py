# src/brand_watch/brand/segmenter.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List

# Un point ou un saut de ligne termine un segment
_TERMINATORS = re.compile(r"[.\n]")


@dataclass(frozen=True)
class Segment:
    text: str
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        # le terminateur qui suit appartient au segment
        return self.start <= offset <= self.end


def segment(text: str) -> List[str]:
    """
    Découpe le texte en segments ordonnés (split sur '.' et '\\n').
    Les segments vides sont conservés pour que les positions restent alignées;
    un texte vide donne [""].
    """
    return _TERMINATORS.split(text or "")


def segment_spans(text: str) -> List[Segment]:
    """Comme segment(), avec l'offset de début/fin de chaque segment dans le texte."""
    text = text or ""
    spans: List[Segment] = []
    start = 0
    for m in _TERMINATORS.finditer(text):
        spans.append(Segment(text[start:m.start()], start, m.start()))
        start = m.end()
    spans.append(Segment(text[start:], start, len(text)))
    return spans
