"""Answer checking and prompt helpers for a typed-word quiz."""
from __future__ import annotations
import math
import random
import re
from typing import Iterable, List, Optional

from wordquiz.domain.quiz.scoring import Outcome


def grade_answer(expected: str, typed: str) -> Outcome:
    if (typed or "").strip().lower() == (expected or "").strip().lower():
        return Outcome.CORRECT
    return Outcome.INCORRECT


def pick_example_sentence(sentences: List[str], rng: Optional[random.Random] = None) -> str:
    if not sentences:
        return ""
    return (rng or random).choice(sentences)


def mask_word(sentence: str, word: str) -> str:
    """Blank out every occurrence of ``word`` with one underscore per letter."""
    if not word:
        return sentence
    return re.sub(re.escape(word), "_" * len(word), sentence, flags=re.IGNORECASE)


def reveal_hint(word: str, revealed: Iterable[int] = (), rng: Optional[random.Random] = None) -> List[int]:
    """
    Return up to ceil(len(word) / 3) new letter positions to show.

    Positions already in ``revealed`` are never returned again; the result
    is empty once every letter is visible.
    """
    rng = rng or random
    shown = set(revealed)
    available = [i for i in range(len(word)) if i not in shown]
    count = min(math.ceil(len(word) / 3), len(available))
    return sorted(rng.sample(available, count))
