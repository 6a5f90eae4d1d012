"""Application service for the word catalogue."""
from __future__ import annotations
import logging
from typing import List, Optional

from wordquiz.domain.common.result import CONFLICT, UNAVAILABLE, Result
from wordquiz.domain.word.models import VocabularyItem, WordId
from wordquiz.domain.word.rules import clean_word_name, normalise_level, split_example_sentences
from wordquiz.domain.word.service import WordDomainService
from wordquiz.integrations.ai_word_generator import AIWordGenerator, WordGenerationError
from wordquiz.persistence.interfaces.word_repository import WordRepository

logger = logging.getLogger(__name__)


class WordAppService:
    def __init__(self, repo: WordRepository, generator: Optional[AIWordGenerator] = None):
        self._repo = repo
        self._generator = generator or AIWordGenerator()
        self._domain = WordDomainService()

    # ------------------------------------------------------------------
    # READ
    # ------------------------------------------------------------------
    def list_words(self, learner_id: str) -> List[VocabularyItem]:
        return self._repo.list_visible_to(learner_id)

    def get_word(self, learner_id: str, word_id: WordId) -> Optional[VocabularyItem]:
        word = self._repo.get_by_id(word_id)
        if word is None or not word.is_visible_to(learner_id):
            return None
        return word

    # ------------------------------------------------------------------
    # AI DRAFT
    # ------------------------------------------------------------------
    def generate_draft(self, raw_word: str) -> Result[dict]:
        name = clean_word_name(raw_word)
        if not name:
            return Result.fail("Word is required")
        if self._repo.exists_by_name(name):
            return Result.fail(f'The word "{name}" already exists.', code=CONFLICT)

        try:
            generated = self._generator.generate(name)
        except WordGenerationError as e:
            return Result.fail(str(e), code=f"{UNAVAILABLE}:{e.kind}")

        level = normalise_level(generated["level"])
        if level is None:
            return Result.fail(
                f"AI returned an invalid level {generated['level']!r}.",
                code=f"{UNAVAILABLE}:{WordGenerationError.FORMAT}",
            )

        sentences = generated["example_sentence"]
        if isinstance(sentences, str):
            sentences = split_example_sentences(sentences)
        return Result.ok({
            "name": name,
            "speech": generated["speech"],
            "meaning": generated["meaning"],
            "example_sentences": list(sentences),
            "level": level,
        })

    # ------------------------------------------------------------------
    # CREATE
    # ------------------------------------------------------------------
    def add_word(self, owner_id: str, data: dict) -> Result[VocabularyItem]:
        result = self._domain.create_word(owner_id, data)
        if not result.is_success:
            return Result.fail(result.error)

        word = result.value
        if self._repo.exists_by_name(word.name):
            return Result.fail(f'The word "{word.name}" already exists.', code=CONFLICT)

        saved = self._repo.add(word)
        logger.info("Learner %s added word '%s' (id=%s)", owner_id, saved.name, saved.id)
        return Result.ok(saved)
