# src/brand_watch/brand/detector.py
"""
Détection d'une mention de marque dans un texte généré.

Trois passes successives, la première qui trouve gagne (insensible à la casse):
  1. exact   : la marque est une sous-chaîne d'un segment
  2. loose   : les mots de la marque séparés par espaces / tirets / underscores
  3. partial : un mot du texte contient la marque (ou l'inverse), ponctuation retirée

La position renvoyée est l'index 1-based du segment (cf. segmenter).
"""
from __future__ import annotations
import re
from typing import List, Optional

from src.brand_watch.brand.brand_models import DetectionResult
from src.brand_watch.brand.catalog import compact, loose_pattern
from src.brand_watch.brand.segmenter import Segment, segment, segment_spans

MIN_PARTIAL_LEN = 3  # les deux tokens doivent être strictement plus longs

_WORD = re.compile(r"\S+")
_ALNUM = re.compile(r"[^\W_]")


def detect_exact(segments: List[str], brand: str) -> Optional[int]:
    needle = brand.lower()
    for i, seg in enumerate(segments):
        if needle in seg.lower():
            return i + 1
    return None


def detect_loose(segments: List[str], brand: str) -> Optional[int]:
    rx = loose_pattern(brand)
    for i, seg in enumerate(segments):
        if rx.search(seg):
            return i + 1
    return None


def _owning_segment(spans: List[Segment], offset: int) -> int:
    for i, span in enumerate(spans):
        if span.contains(offset):
            return i + 1
    raise ValueError(f"offset {offset} outside text")


def detect_partial(text: str, brand: str) -> Optional[int]:
    target = compact(brand)
    if len(target) <= MIN_PARTIAL_LEN:
        return None

    spans = segment_spans(text)
    for m in _WORD.finditer(text):
        word = compact(m.group(0))
        if len(word) <= MIN_PARTIAL_LEN:
            continue
        if target in word or word in target:
            # offset du premier caractère alphanumérique: ".NET" appartient au segment suivant
            first = _ALNUM.search(m.group(0))
            offset = m.start() + (first.start() if first else 0)
            return _owning_segment(spans, offset)
    return None


def detect(text: str, brand_name: str) -> DetectionResult:
    if not text or not brand_name or not brand_name.strip():
        return DetectionResult.miss()

    brand = brand_name.strip()
    segments = segment(text)

    position = detect_exact(segments, brand)
    if position is not None:
        return DetectionResult.hit(position, "exact")

    position = detect_loose(segments, brand)
    if position is not None:
        return DetectionResult.hit(position, "loose")

    position = detect_partial(text, brand)
    if position is not None:
        return DetectionResult.hit(position, "partial")

    return DetectionResult.miss()
