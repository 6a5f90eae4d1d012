"""Load the shared word catalogue from a JSON file.

Usage: python -m wordquiz.seed words.json

The file holds a list of objects with ``name``, ``speech``, ``meaning``,
``example_sentences`` (list or one string) and ``level``.
"""
from __future__ import annotations
import json
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

from wordquiz.core import config
from wordquiz.core.logging_config import setup_logging
from wordquiz.domain.word.models import SOURCE_OXFORD, VocabularyItem
from wordquiz.domain.word.rules import validate_word_content
from wordquiz.persistence.db import init_db
from wordquiz.persistence.interfaces.word_repository import WordRepository
from wordquiz.persistence.repositories.sqlite.sqlite_word_repository import SqliteWordRepository

logger = logging.getLogger(__name__)


def seed_catalogue(entries: List[dict], repo: WordRepository) -> int:
    """Insert valid, not-yet-present entries as shared words. Returns how many were added."""
    added = 0
    now = datetime.now(timezone.utc).isoformat()
    for entry in entries:
        if not isinstance(entry, dict):
            logger.warning("Skipping catalogue entry that is not an object: %r", entry)
            continue
        validation = validate_word_content(entry)
        if not validation.is_success:
            logger.warning("Skipping catalogue entry: %s", validation.error)
            continue
        clean = validation.value
        if repo.exists_by_name(clean["name"]):
            continue
        repo.add(VocabularyItem(
            id=None,
            name=clean["name"],
            speech=clean["speech"],
            meaning=clean["meaning"],
            example_sentences=clean["example_sentences"],
            level=clean["level"],
            source=SOURCE_OXFORD,
            owner_id=None,
            created_at=now,
        ))
        added += 1
    return added


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print(__doc__)
        return 2

    setup_logging(config.LOG_LEVEL)
    init_db()
    with open(argv[0], "r", encoding="utf-8") as f:
        entries = json.load(f)
    added = seed_catalogue(entries, SqliteWordRepository())
    logger.info("Added %d of %d catalogue word(s)", added, len(entries))
    return 0


if __name__ == "__main__":
    sys.exit(main())
