"""Validation and normalisation rules for vocabulary items."""
from __future__ import annotations
import re
from typing import List, Optional

from wordquiz.domain.common.result import Result
from wordquiz.domain.word.models import PROFICIENCY_LEVELS

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")


def clean_word_name(raw: str) -> str:
    """'  Ice Cream ' -> 'icecream'. Anything that is not a string cleans to ''."""
    if not isinstance(raw, str):
        return ""
    return _WHITESPACE.sub("", raw.strip().lower())


def split_example_sentences(text: str) -> List[str]:
    """Split a 'First. Second. Third.' block into its sentences."""
    return [s.strip() for s in _SENTENCE_BREAK.split(text or "") if s.strip()]


def normalise_level(raw) -> Optional[str]:
    """'b2' -> 'B2'; None for anything outside PROFICIENCY_LEVELS."""
    if not isinstance(raw, str):
        return None
    level = raw.strip().upper()
    return level if level in PROFICIENCY_LEVELS else None


def _text_field(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        return None
    return value.strip()


def validate_word_content(data: dict) -> Result[dict]:
    """Checks the minimum fields of a word and returns a normalised copy."""
    if not isinstance(data, dict):
        return Result.fail("Word data must be an object.")

    name = clean_word_name(data.get("name"))
    if not name:
        return Result.fail("Word 'name' is required and must be non-empty text.")

    meaning = _text_field(data, "meaning")
    if not meaning:
        return Result.fail(f"Word '{name}' needs a meaning given as text.")

    speech = _text_field(data, "speech")
    if speech is None:
        return Result.fail(f"Word '{name}' has a part of speech that is not text.")

    sentences = data.get("example_sentences") or []
    if isinstance(sentences, str):
        sentences = split_example_sentences(sentences)
    if not isinstance(sentences, list) or not all(isinstance(s, str) for s in sentences):
        return Result.fail(f"Word '{name}' example sentences must be text.")
    sentences = [s.strip() for s in sentences if s.strip()]
    if not sentences:
        return Result.fail(f"Word '{name}' needs at least one example sentence.")

    level = normalise_level(data.get("level"))
    if level is None:
        return Result.fail(
            f"'{data.get('level')}' is not a valid level. Must be one of {list(PROFICIENCY_LEVELS)}."
        )

    return Result.ok({
        **data,
        "name": name,
        "speech": speech.lower(),
        "meaning": meaning,
        "example_sentences": sentences,
        "level": level,
    })
