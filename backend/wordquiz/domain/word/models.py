"""Vocabulary domain models. Pure Python, no DB or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Union

WordId = Union[int, str]

PROFICIENCY_LEVELS = ("A1", "A2", "B1", "B2", "C1", "C2")

SOURCE_OXFORD = "oxford"  # shared catalogue, visible to every learner
SOURCE_CUSTOM = "custom"  # added by (and visible to) one learner
WORD_SOURCES = {SOURCE_OXFORD, SOURCE_CUSTOM}


@dataclass
class VocabularyItem:
    id: Optional[WordId]
    name: str
    speech: str
    meaning: str
    example_sentences: List[str] = field(default_factory=list)
    level: str = ""
    source: str = SOURCE_CUSTOM
    owner_id: Optional[str] = None
    created_at: str = ""

    def is_visible_to(self, learner_id: str) -> bool:
        return self.source == SOURCE_OXFORD or self.owner_id == learner_id


@dataclass
class LearnerItemWeight:
    learner_id: str
    word_id: WordId
    weight: float
    updated_at: str = ""


@dataclass(frozen=True)
class AttemptRecord:
    learner_id: str
    word_id: WordId
    result: int  # 1 = correct, 0 = incorrect
    created_at: str
    id: Optional[int] = None
