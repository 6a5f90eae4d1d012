"""SQLite implementation of AttemptRepository (table ``attempt_log``)."""
from __future__ import annotations
import dataclasses
from typing import List, Optional

from wordquiz.domain.word.models import AttemptRecord, WordId
from wordquiz.persistence.db import get_connection
from wordquiz.persistence.interfaces.attempt_repository import AttemptRepository


def _row_to_attempt(row) -> AttemptRecord:
    return AttemptRecord(
        id=row["id"],
        learner_id=row["learner_id"],
        word_id=row["word_id"],
        result=row["result"],
        created_at=row["created_at"],
    )


class SqliteAttemptRepository(AttemptRepository):

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = db_path

    def append(self, record: AttemptRecord) -> AttemptRecord:
        conn = get_connection(self._db_path)
        try:
            cur = conn.execute(
                """
                INSERT INTO attempt_log (learner_id, word_id, result, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (record.learner_id, record.word_id, record.result, record.created_at),
            )
            conn.commit()
            attempt_id = cur.lastrowid
        finally:
            conn.close()
        return dataclasses.replace(record, id=attempt_id)

    def list_for_word(self, learner_id: str, word_id: WordId) -> List[AttemptRecord]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            """
            SELECT * FROM attempt_log
            WHERE learner_id = ? AND word_id = ?
            ORDER BY created_at ASC, id ASC
            """,
            (learner_id, word_id),
        ).fetchall()
        conn.close()
        return [_row_to_attempt(r) for r in rows]

    def list_for_learner(self, learner_id: str, since: Optional[str] = None) -> List[AttemptRecord]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            """
            SELECT * FROM attempt_log
            WHERE learner_id = ? AND created_at >= ?
            ORDER BY created_at ASC, id ASC
            """,
            (learner_id, since or ""),
        ).fetchall()
        conn.close()
        return [_row_to_attempt(r) for r in rows]
