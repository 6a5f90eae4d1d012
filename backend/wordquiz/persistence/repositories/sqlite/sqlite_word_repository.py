"""SQLite implementation of WordRepository."""
from __future__ import annotations
import json
from typing import List, Optional

from wordquiz.domain.word.models import SOURCE_OXFORD, VocabularyItem, WordId
from wordquiz.persistence.db import get_connection
from wordquiz.persistence.interfaces.word_repository import WordRepository


def _row_to_word(row) -> VocabularyItem:
    return VocabularyItem(
        id=row["id"],
        name=row["name"],
        speech=row["speech"],
        meaning=row["meaning"],
        example_sentences=json.loads(row["example_sentences"] or "[]"),
        level=row["level"],
        source=row["source"],
        owner_id=row["owner_id"],
        created_at=row["created_at"],
    )


class SqliteWordRepository(WordRepository):

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = db_path

    def add(self, item: VocabularyItem) -> VocabularyItem:
        conn = get_connection(self._db_path)
        try:
            cur = conn.execute(
                """
                INSERT INTO words (
                    name, speech, meaning, example_sentences,
                    level, source, owner_id, created_at
                ) VALUES (
                    :name, :speech, :meaning, :example_sentences,
                    :level, :source, :owner_id, :created_at
                )
                """,
                {
                    "name": item.name,
                    "speech": item.speech,
                    "meaning": item.meaning,
                    "example_sentences": json.dumps(item.example_sentences),
                    "level": item.level,
                    "source": item.source,
                    "owner_id": item.owner_id,
                    "created_at": item.created_at,
                },
            )
            conn.commit()
            item.id = cur.lastrowid
        finally:
            conn.close()
        return item

    def get_by_id(self, word_id: WordId) -> Optional[VocabularyItem]:
        conn = get_connection(self._db_path)
        row = conn.execute("SELECT * FROM words WHERE id = ?", (word_id,)).fetchone()
        conn.close()
        return _row_to_word(row) if row else None

    def exists_by_name(self, name: str) -> bool:
        conn = get_connection(self._db_path)
        row = conn.execute("SELECT 1 FROM words WHERE name = ? LIMIT 1", (name,)).fetchone()
        conn.close()
        return row is not None

    def list_visible_to(self, learner_id: str) -> List[VocabularyItem]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            "SELECT * FROM words WHERE source = ? OR owner_id = ? ORDER BY id ASC",
            (SOURCE_OXFORD, learner_id),
        ).fetchall()
        conn.close()
        return [_row_to_word(r) for r in rows]
