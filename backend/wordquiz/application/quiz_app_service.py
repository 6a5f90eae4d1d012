"""Quiz session workflow: load pool, select, grade, reweigh, persist, log."""
from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from wordquiz.core import config
from wordquiz.domain.common.errors import InvalidInput
from wordquiz.domain.common.result import Result
from wordquiz.domain.quiz.grading import grade_answer, mask_word, pick_example_sentence, reveal_hint
from wordquiz.domain.quiz.progress import DailyProgress, accuracy, daily_progress
from wordquiz.domain.quiz.scoring import Outcome, ScorePolicy, next_weight
from wordquiz.domain.quiz.selection import select_next
from wordquiz.domain.word.models import AttemptRecord, LearnerItemWeight, VocabularyItem, WordId
from wordquiz.persistence.interfaces.attempt_repository import AttemptRepository
from wordquiz.persistence.interfaces.score_repository import ScoreRepository
from wordquiz.persistence.interfaces.word_repository import WordRepository

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class QuizPrompt:
    word: VocabularyItem
    weight: float
    sentence: str
    length: int


@dataclass
class QuizResult:
    word_id: WordId
    outcome: Outcome
    weight: float
    answer: Optional[str]


@dataclass
class ProgressReport:
    days: List[DailyProgress]
    accuracy: float
    total_attempts: int


class QuizAppService:
    def __init__(
        self,
        words: WordRepository,
        scores: ScoreRepository,
        attempts: AttemptRepository,
        policy: Optional[ScorePolicy] = None,
        default_weight: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        self._words = words
        self._scores = scores
        self._attempts = attempts
        self._policy = policy or ScorePolicy(
            increment=config.SCORE_INCREMENT,
            decrement=config.SCORE_DECREMENT,
            floor=config.WEIGHT_FLOOR,
        )
        self._default_weight = default_weight if default_weight is not None else config.DEFAULT_WEIGHT
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # SELECT
    # ------------------------------------------------------------------
    def next_word(self, learner_id: str) -> Result[QuizPrompt]:
        words = self._words.list_visible_to(learner_id)
        if not words:
            return Result.not_found("No words found")

        weights = self._load_weights(learner_id, [w.id for w in words])
        pool = [(w, weights.get(w.id, self._default_weight)) for w in words]
        word = select_next(pool, rng=self._rng)

        sentence = pick_example_sentence(word.example_sentences, rng=self._rng)
        return Result.ok(QuizPrompt(
            word=word,
            weight=weights.get(word.id, self._default_weight),
            sentence=mask_word(sentence, word.name),
            length=len(word.name),
        ))

    def _load_weights(self, learner_id: str, word_ids: List[WordId]) -> Dict[WordId, float]:
        weights = self._scores.get_weights(learner_id, word_ids)
        missing = [wid for wid in word_ids if wid not in weights]
        if missing:
            created = self._scores.initialize(
                learner_id, missing, self._default_weight, config.SCORE_INIT_CHUNK_SIZE
            )
            logger.info("Initialised %d score(s) for learner %s", created, learner_id)
            weights = self._scores.get_weights(learner_id, word_ids)
        return weights

    # ------------------------------------------------------------------
    # GRADE
    # ------------------------------------------------------------------
    def submit_answer(self, learner_id: str, word_id: WordId, answer: str) -> Result[QuizResult]:
        word = self._visible_word(learner_id, word_id)
        if word is None:
            return Result.not_found(f"Word '{word_id}' not found.")

        outcome = grade_answer(word.name, answer)
        weight = self._record(learner_id, word.id, outcome)
        return Result.ok(QuizResult(
            word_id=word.id,
            outcome=outcome,
            weight=weight,
            answer=word.name if outcome is Outcome.CORRECT else None,
        ))

    def skip(self, learner_id: str, word_id: WordId) -> Result[QuizResult]:
        """Giving up counts as a miss, and the answer is revealed."""
        word = self._visible_word(learner_id, word_id)
        if word is None:
            return Result.not_found(f"Word '{word_id}' not found.")

        weight = self._record(learner_id, word.id, Outcome.INCORRECT)
        return Result.ok(QuizResult(word_id=word.id, outcome=Outcome.INCORRECT, weight=weight, answer=word.name))

    def _record(self, learner_id: str, word_id: WordId, outcome: Outcome) -> float:
        now = _now().isoformat()
        current, new_weight = self._scores.update_weight(
            learner_id,
            word_id,
            lambda weight: next_weight(weight, outcome, self._policy),
            self._default_weight,
            now,
        )
        self._attempts.append(AttemptRecord(learner_id, word_id, outcome.result, now))
        logger.debug("Learner %s word %s: %s, weight %s -> %s", learner_id, word_id, outcome.value, current, new_weight)
        return new_weight

    # ------------------------------------------------------------------
    # HINTS / HISTORY / PROGRESS
    # ------------------------------------------------------------------
    def hint(self, learner_id: str, word_id: WordId, revealed: Iterable[int] = ()) -> Result[Dict[int, str]]:
        word = self._visible_word(learner_id, word_id)
        if word is None:
            return Result.not_found(f"Word '{word_id}' not found.")
        return Result.ok({i: word.name[i] for i in reveal_hint(word.name, revealed, rng=self._rng)})

    def history(self, learner_id: str, word_id: WordId) -> Result[List[AttemptRecord]]:
        if self._visible_word(learner_id, word_id) is None:
            return Result.not_found(f"Word '{word_id}' not found.")
        return Result.ok(self._attempts.list_for_word(learner_id, word_id))

    def progress(self, learner_id: str, days: int = 30) -> ProgressReport:
        today = _now().date()
        start = datetime.combine(today - timedelta(days=days - 1), time.min, tzinfo=timezone.utc)
        attempts = self._attempts.list_for_learner(learner_id, since=start.isoformat())
        return ProgressReport(
            days=daily_progress(attempts, today=today, days=days),
            accuracy=accuracy(attempts),
            total_attempts=len(attempts),
        )

    # ------------------------------------------------------------------
    # SCORES
    # ------------------------------------------------------------------
    def get_scores(self, learner_id: str, word_ids: Optional[List[WordId]] = None) -> Result[Dict[WordId, float]]:
        """Stored weights, with the default filled in for requested words never seen."""
        if word_ids is None:
            return Result.ok({w.word_id: w.weight for w in self._scores.list_for_learner(learner_id)})
        for wid in word_ids:
            if self._visible_word(learner_id, wid) is None:
                return Result.not_found(f"Word '{wid}' not found.")
        stored = self._scores.get_weights(learner_id, word_ids)
        return Result.ok({wid: stored.get(wid, self._default_weight) for wid in word_ids})

    def set_score(
        self,
        learner_id: str,
        word_id: WordId,
        result: Optional[int] = None,
        score: Optional[float] = None,
    ) -> Result[float]:
        if self._visible_word(learner_id, word_id) is None:
            return Result.not_found(f"Word '{word_id}' not found.")

        if result is not None:
            try:
                outcome = Outcome.from_result(result)
            except InvalidInput as e:
                return Result.fail(str(e))
            return Result.ok(self._record(learner_id, word_id, outcome))

        if score is None:
            return Result.fail("Either 'result' or 'score' is required.")
        if not math.isfinite(score) or score < self._policy.floor:
            return Result.fail(f"Score must be a finite number of at least {self._policy.floor}.")
        self._scores.upsert(LearnerItemWeight(learner_id, word_id, score, _now().isoformat()))
        return Result.ok(score)

    def _visible_word(self, learner_id: str, word_id: WordId) -> Optional[VocabularyItem]:
        word = self._words.get_by_id(word_id)
        if word is None or not word.is_visible_to(learner_id):
            return None
        return word
