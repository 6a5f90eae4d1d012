"""Aggregations over the attempt log."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List

from wordquiz.domain.common.errors import InvalidInput
from wordquiz.domain.word.models import AttemptRecord


@dataclass(frozen=True)
class DailyProgress:
    day: date
    attempts: int
    correct: int


def _attempt_day(record: AttemptRecord) -> date:
    return datetime.fromisoformat(record.created_at).date()


def daily_progress(attempts: Iterable[AttemptRecord], today: date, days: int = 30) -> List[DailyProgress]:
    """One entry per calendar day ending at ``today``, oldest first, zero-filled."""
    if days < 1:
        raise InvalidInput(f"days must be at least 1, got {days}.")

    first = today - timedelta(days=days - 1)
    totals: Dict[date, List[int]] = {first + timedelta(days=n): [0, 0] for n in range(days)}
    for record in attempts:
        bucket = totals.get(_attempt_day(record))
        if bucket is None:
            continue
        bucket[0] += 1
        bucket[1] += record.result

    return [DailyProgress(day=d, attempts=a, correct=c) for d, (a, c) in totals.items()]


def accuracy(attempts: Iterable[AttemptRecord]) -> float:
    results = [a.result for a in attempts]
    if not results:
        return 0.0
    return sum(results) / len(results)
