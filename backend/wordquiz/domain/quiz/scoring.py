"""Weight update after a graded attempt."""
from __future__ import annotations
import enum
import math
from dataclasses import dataclass
from typing import Optional

from wordquiz.domain.common.errors import InvalidInput


class Outcome(enum.Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"

    @property
    def result(self) -> int:
        """Attempt-log encoding: 1 for correct, 0 for incorrect."""
        return 1 if self is Outcome.CORRECT else 0

    @classmethod
    def from_result(cls, result: int) -> "Outcome":
        if result == 1:
            return cls.CORRECT
        if result == 0:
            return cls.INCORRECT
        raise InvalidInput(f"Result must be 0 or 1, got {result!r}.")


@dataclass(frozen=True)
class ScorePolicy:
    """Step sizes of the update rule. The defaults are the +1 / -1, floor 1 rule."""

    increment: float = 1
    decrement: float = 1
    floor: float = 1

    def __post_init__(self):
        if self.increment <= 0 or self.decrement <= 0:
            raise InvalidInput("Score steps must be positive.")
        if self.floor <= 0:
            raise InvalidInput("Weight floor must be positive.")


DEFAULT_POLICY = ScorePolicy()


def next_weight(current_weight: float, outcome: Outcome, policy: Optional[ScorePolicy] = None) -> float:
    """
    A miss raises the weight so the word resurfaces sooner; a hit lowers it,
    never below the floor. Pure and deterministic.
    """
    policy = policy or DEFAULT_POLICY
    if isinstance(current_weight, bool) or not isinstance(current_weight, (int, float)):
        raise InvalidInput(f"Weight must be a number, got {current_weight!r}.")
    if not math.isfinite(current_weight) or current_weight < policy.floor:
        raise InvalidInput(f"Weight must be at least {policy.floor}, got {current_weight!r}.")

    if outcome is Outcome.CORRECT:
        return max(policy.floor, current_weight - policy.decrement)
    if outcome is Outcome.INCORRECT:
        return current_weight + policy.increment
    raise InvalidInput(f"Unknown outcome {outcome!r}.")
