"""Abstract repository interface for vocabulary items."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from wordquiz.domain.word.models import VocabularyItem, WordId


class WordRepository(ABC):

    @abstractmethod
    def add(self, item: VocabularyItem) -> VocabularyItem:
        """Insert a new word and return it with its storage-assigned id."""
        ...

    @abstractmethod
    def get_by_id(self, word_id: WordId) -> Optional[VocabularyItem]:
        ...

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """True if any word, from any source, already has this name."""
        ...

    @abstractmethod
    def list_visible_to(self, learner_id: str) -> List[VocabularyItem]:
        """All shared catalogue words plus the learner's own, ordered by id."""
        ...
