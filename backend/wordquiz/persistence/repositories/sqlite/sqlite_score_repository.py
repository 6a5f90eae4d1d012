"""SQLite implementation of ScoreRepository (table ``user_word_scores``)."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from wordquiz.domain.word.models import LearnerItemWeight, WordId
from wordquiz.persistence.db import get_connection
from wordquiz.persistence.interfaces.score_repository import ScoreRepository


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _row_to_weight(row) -> LearnerItemWeight:
    return LearnerItemWeight(
        learner_id=row["learner_id"],
        word_id=row["word_id"],
        weight=row["score"],
        updated_at=row["updated_at"],
    )


class SqliteScoreRepository(ScoreRepository):

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = db_path

    def get_weight(self, learner_id: str, word_id: WordId) -> Optional[float]:
        conn = get_connection(self._db_path)
        row = conn.execute(
            "SELECT score FROM user_word_scores WHERE learner_id = ? AND word_id = ?",
            (learner_id, word_id),
        ).fetchone()
        conn.close()
        return row["score"] if row else None

    def get_weights(self, learner_id: str, word_ids: Iterable[WordId]) -> Dict[WordId, float]:
        wanted = set(word_ids)
        if not wanted:
            return {}
        # Filtering in Python keeps clear of SQLite's bound-parameter limit
        return {w.word_id: w.weight for w in self.list_for_learner(learner_id) if w.word_id in wanted}

    def list_for_learner(self, learner_id: str) -> List[LearnerItemWeight]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            "SELECT * FROM user_word_scores WHERE learner_id = ? ORDER BY word_id ASC",
            (learner_id,),
        ).fetchall()
        conn.close()
        return [_row_to_weight(r) for r in rows]

    def initialize(
        self,
        learner_id: str,
        word_ids: Iterable[WordId],
        default_weight: float,
        chunk_size: int = 100,
    ) -> int:
        now = _now_iso()
        records = [(learner_id, word_id, default_weight, now) for word_id in word_ids]
        created = 0
        conn = get_connection(self._db_path)
        try:
            for start in range(0, len(records), chunk_size):
                before = conn.total_changes
                conn.executemany(
                    """
                    INSERT INTO user_word_scores (learner_id, word_id, score, updated_at)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(learner_id, word_id) DO NOTHING
                    """,
                    records[start:start + chunk_size],
                )
                conn.commit()
                created += conn.total_changes - before
        finally:
            conn.close()
        return created

    def update_weight(
        self,
        learner_id: str,
        word_id: WordId,
        update: Callable[[float], float],
        default_weight: float,
        updated_at: str,
    ) -> Tuple[float, float]:
        conn = get_connection(self._db_path)
        try:
            # Take the write lock before reading so concurrent updates serialise
            conn.execute("BEGIN IMMEDIATE")
            row = conn.execute(
                "SELECT score FROM user_word_scores WHERE learner_id = ? AND word_id = ?",
                (learner_id, word_id),
            ).fetchone()
            current = row["score"] if row else default_weight
            new_weight = update(current)
            conn.execute(
                """
                INSERT INTO user_word_scores (learner_id, word_id, score, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(learner_id, word_id) DO UPDATE SET
                    score      = excluded.score,
                    updated_at = excluded.updated_at
                """,
                (learner_id, word_id, new_weight, updated_at),
            )
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
        return current, new_weight

    def upsert(self, weight: LearnerItemWeight) -> None:
        conn = get_connection(self._db_path)
        try:
            conn.execute(
                """
                INSERT INTO user_word_scores (learner_id, word_id, score, updated_at)
                VALUES (:learner_id, :word_id, :score, :updated_at)
                ON CONFLICT(learner_id, word_id) DO UPDATE SET
                    score      = excluded.score,
                    updated_at = excluded.updated_at
                """,
                {
                    "learner_id": weight.learner_id,
                    "word_id": weight.word_id,
                    "score": weight.weight,
                    "updated_at": weight.updated_at or _now_iso(),
                },
            )
            conn.commit()
        finally:
            conn.close()
