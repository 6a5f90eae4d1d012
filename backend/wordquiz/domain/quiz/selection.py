"""Weighted word selection: heavier words come back more often."""
from __future__ import annotations
import math
import random
from typing import Optional, Sequence, Tuple, TypeVar

from wordquiz.domain.common.errors import InvalidInput

T = TypeVar("T")


def _check_weight(weight) -> float:
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidInput(f"Weight must be a number, got {weight!r}.")
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidInput(f"Weight must be finite and positive, got {weight!r}.")
    return weight


def select_next(pool: Sequence[Tuple[T, float]], rng: Optional[random.Random] = None) -> T:
    """
    Pick one item from ``pool`` with probability ``weight / total``.

    ``pool`` is a sequence of ``(item, weight)`` pairs, walked in the order
    given. Callers substitute the default weight for unseen items before
    calling. ``rng`` only needs a ``random()`` method; the module-level
    generator is used when omitted. Nothing is mutated.
    """
    if not pool:
        raise InvalidInput("Cannot select from an empty pool.")

    weights = [_check_weight(weight) for _, weight in pool]
    total = math.fsum(weights)

    remainder = (rng or random).random() * total
    for (item, _), weight in zip(pool, weights):
        remainder -= weight
        if remainder <= 0:
            return item

    # Float drift can leave a sliver of remainder after the last item
    return pool[-1][0]
