"""JSON import/export payloads for the word store."""

from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from .models import Word

EXPORT_VERSION = 1


class InvalidDictionaryFormat(ValueError):
    pass


def parse_dictionary_words(payload: Any) -> List[Any]:
    """Accept ``{"words": [...]}`` or a bare list of words."""
    if isinstance(payload, dict) and isinstance(payload.get("words"), list):
        words = payload["words"]
    elif isinstance(payload, list):
        words = payload
    else:
        raise InvalidDictionaryFormat("Invalid dictionary format.")

    if not all(isinstance(item, dict) for item in words):
        raise InvalidDictionaryFormat("Every word entry must be an object.")
    return words


def build_export_data(
    words: Iterable[Word], now: Optional[datetime] = None
) -> Dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    return {
        "version": EXPORT_VERSION,
        "exportedAt": now.isoformat(),
        "words": [
            {
                "id": w.id,
                "word": w.word,
                "meaning": w.meaning,
                "createdAt": w.created_at.isoformat() if w.created_at else None,
            }
            for w in words
        ],
    }


def export_filename(
    prefix: str = "dictionary-export", today: Optional[date] = None
) -> str:
    today = today or date.today()
    return f"{prefix}-{today.isoformat()}.json"
