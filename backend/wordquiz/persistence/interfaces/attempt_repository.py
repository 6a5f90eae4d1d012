"""Abstract repository interface for the append-only attempt log."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from wordquiz.domain.word.models import AttemptRecord, WordId


class AttemptRepository(ABC):

    @abstractmethod
    def append(self, record: AttemptRecord) -> AttemptRecord:
        """Store a new attempt and return it with its id. Attempts are never updated."""
        ...

    @abstractmethod
    def list_for_word(self, learner_id: str, word_id: WordId) -> List[AttemptRecord]:
        """The learner's attempts on one word, oldest first."""
        ...

    @abstractmethod
    def list_for_learner(self, learner_id: str, since: Optional[str] = None) -> List[AttemptRecord]:
        """All of the learner's attempts at or after ``since`` (ISO-8601), oldest first."""
        ...
