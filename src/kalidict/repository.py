"""SQLite-backed word store."""

import logging
import random
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from .database import get_db_connection
from .models import Word

logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime)


class WordNotFound(LookupError):
    pass


def _row_to_word(row) -> Word:
    return Word(
        id=row["id"],
        word=row["word"],
        meaning=row["meaning"],
        created_at=row["created_at"],
    )


def _field(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


class WordRepository:
    """Add, delete, list and bulk-import vocabulary words."""

    def _query(self, sql: str, params: Iterable[Any] = ()) -> List[Word]:
        conn = get_db_connection()
        try:
            rows = conn.execute(sql, tuple(params)).fetchall()
        finally:
            conn.close()
        return [_row_to_word(row) for row in rows]

    def list_words(self) -> List[Word]:
        """All words ordered alphabetically."""
        return self._query("SELECT * FROM words ORDER BY word COLLATE NOCASE, id")

    def all_words(self) -> List[Word]:
        """All words in insertion order."""
        return self._query("SELECT * FROM words ORDER BY id")

    def get_word(self, word_id: int) -> Word:
        words = self._query("SELECT * FROM words WHERE id = ?", (word_id,))
        if not words:
            raise WordNotFound(f"Word not found: {word_id}")
        return words[0]

    def search(self, term: str) -> List[Word]:
        if not term:
            return self.list_words()
        pattern = f"%{term.lower()}%"
        return self._query(
            """
            SELECT * FROM words
            WHERE lower(word) LIKE ? OR lower(meaning) LIKE ?
            ORDER BY word COLLATE NOCASE, id
            """,
            (pattern, pattern),
        )

    def random_word(
        self, exclude_id: Optional[int] = None, rng: Optional[random.Random] = None
    ) -> Optional[Word]:
        """Pick a random word, avoiding ``exclude_id`` when another word exists."""
        words = self.all_words()
        if not words:
            return None
        candidates = [w for w in words if w.id != exclude_id] or words
        return (rng or random).choice(candidates)

    def add_word(self, word: str, meaning: str) -> Word:
        created_at = datetime.now().isoformat()
        conn = get_db_connection()
        try:
            with conn:
                cursor = conn.execute(
                    "INSERT INTO words (word, meaning, created_at) VALUES (?, ?, ?)",
                    (word.strip(), meaning.strip(), created_at),
                )
                word_id = cursor.lastrowid
        finally:
            conn.close()
        logger.info(f"Added word {word.strip()!r} [id={word_id}]")
        return self.get_word(word_id)

    def delete_word(self, word_id: int) -> None:
        conn = get_db_connection()
        try:
            with conn:
                deleted = conn.execute(
                    "DELETE FROM words WHERE id = ?", (word_id,)
                ).rowcount
        finally:
            conn.close()
        if deleted == 0:
            raise WordNotFound(f"Word not found: {word_id}")
        logger.info(f"Deleted word [id={word_id}]")

    def import_words(
        self,
        words: List[Any],
        replace_existing: bool = False,
        only_add_missing: bool = False,
    ) -> int:
        """Bulk-insert words, returning how many were added.

        ``replace_existing`` clears the store first. ``only_add_missing`` trims
        entries and skips blank words and words already stored (compared
        case-insensitively).
        """
        if not isinstance(words, list):
            raise TypeError("Words must be a list.")

        if only_add_missing and not replace_existing:
            existing = {w.word.strip().lower() for w in self.all_words()}
            rows = []
            for item in words:
                word = (_field(item, "word") or "").strip()
                if not word or word.lower() in existing:
                    continue
                existing.add(word.lower())
                rows.append(self._import_row(item, word))
        else:
            rows = [self._import_row(item, _field(item, "word") or "") for item in words]

        conn = get_db_connection()
        try:
            with conn:
                if replace_existing:
                    conn.execute("DELETE FROM words")
                conn.executemany(
                    "INSERT INTO words (word, meaning, created_at) VALUES (?, ?, ?)",
                    rows,
                )
        finally:
            conn.close()

        logger.info(
            f"Imported {len(rows)} words "
            f"[replace={replace_existing}, only_missing={only_add_missing}]"
        )
        return len(rows)

    @staticmethod
    def _import_row(item: Any, word: str) -> tuple:
        meaning = (_field(item, "meaning") or "").strip()
        raw = _field(item, "created_at") or _field(item, "createdAt")
        created_at = datetime.now()
        if raw:
            try:
                created_at = _DATETIME.validate_python(raw)
            except ValidationError:
                logger.warning(f"Ignoring invalid createdAt {raw!r} for {word!r}")
        return (word, meaning, created_at.isoformat())

    def count(self) -> int:
        conn = get_db_connection()
        try:
            (total,) = conn.execute("SELECT COUNT(*) FROM words").fetchone()
        finally:
            conn.close()
        return total


def to_dicts(words: Iterable[Word]) -> List[Dict[str, Any]]:
    return [w.model_dump(mode="json") for w in words]
