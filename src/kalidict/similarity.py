"""Answer normalization and edit-distance similarity."""

import re
import unicodedata
from typing import Optional

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_TRAILING_PUNCTUATION = re.compile(r"[.?!]+\Z")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """Lower-case, strip accents and trailing ``.?!``, collapse whitespace."""
    if not text:
        return ""
    text = unicodedata.normalize("NFD", text.lower())
    text = _COMBINING_MARKS.sub("", text)
    text = _TRAILING_PUNCTUATION.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def distance(a: str, b: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    if a == b:
        return 0

    matrix = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        matrix[i][0] = i
    for j in range(len(b) + 1):
        matrix[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )

    return matrix[len(a)][len(b)]


def similarity(a: str, b: str) -> float:
    """Return ``1 - distance / longest length``, in the range [0, 1]."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    max_len = max(len(a), len(b)) or 1
    return 1 - distance(a, b) / max_len
