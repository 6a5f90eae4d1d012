"""Abstract repository interface for per-learner word weights."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from wordquiz.domain.word.models import LearnerItemWeight, WordId


class ScoreRepository(ABC):

    @abstractmethod
    def get_weight(self, learner_id: str, word_id: WordId) -> Optional[float]:
        """Return the stored weight, or None if the learner never met the word."""
        ...

    @abstractmethod
    def get_weights(self, learner_id: str, word_ids: Iterable[WordId]) -> Dict[WordId, float]:
        """Stored weights for the given words; missing words are simply absent."""
        ...

    @abstractmethod
    def list_for_learner(self, learner_id: str) -> List[LearnerItemWeight]:
        ...

    @abstractmethod
    def initialize(
        self,
        learner_id: str,
        word_ids: Iterable[WordId],
        default_weight: float,
        chunk_size: int,
    ) -> int:
        """Create rows for words without one. Never overwrites. Returns rows created."""
        ...

    @abstractmethod
    def update_weight(
        self,
        learner_id: str,
        word_id: WordId,
        update: Callable[[float], float],
        default_weight: float,
        updated_at: str,
    ) -> Tuple[float, float]:
        """
        Atomically replace the weight with ``update(current)``.

        A missing row counts as ``default_weight``. Returns ``(old, new)``.
        If ``update`` raises, nothing is written.
        """
        ...

    @abstractmethod
    def upsert(self, weight: LearnerItemWeight) -> None:
        """Insert-or-update keyed by (learner_id, word_id)."""
        ...
