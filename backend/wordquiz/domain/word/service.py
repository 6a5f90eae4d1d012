"""Domain service for building vocabulary items."""
from __future__ import annotations
from datetime import datetime, timezone

from wordquiz.domain.common.result import Result
from wordquiz.domain.word.models import SOURCE_CUSTOM, VocabularyItem
from wordquiz.domain.word.rules import validate_word_content


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class WordDomainService:
    """
    Pure domain operations, no I/O. The application layer checks for
    duplicates and persists what this returns; storage assigns the id.
    """

    def create_word(self, owner_id: str, data: dict) -> Result[VocabularyItem]:
        validation = validate_word_content(data)
        if not validation.is_success:
            return Result.fail(validation.error)

        clean = validation.value
        return Result.ok(VocabularyItem(
            id=None,
            name=clean["name"],
            speech=clean["speech"],
            meaning=clean["meaning"],
            example_sentences=clean["example_sentences"],
            level=clean["level"],
            source=SOURCE_CUSTOM,
            owner_id=owner_id,
            created_at=_now_iso(),
        ))
