import json

from wordquiz import seed
from wordquiz.domain.word.models import SOURCE_OXFORD
from wordquiz.persistence.repositories.sqlite.sqlite_word_repository import SqliteWordRepository


def test_seed_catalogue_adds_valid_new_words(word_repo):
    entries = [
        {"name": "Apple", "speech": "noun", "meaning": "A fruit.", "example_sentences": "An ____ a day.", "level": "A1"},
        {"name": "apple", "speech": "noun", "meaning": "Duplicate.", "example_sentences": ["x."], "level": "A1"},
        {"name": "", "meaning": "No name.", "example_sentences": ["x."], "level": "A1"},
    ]
    assert seed.seed_catalogue(entries, word_repo) == 1
    words = word_repo.list_visible_to("anyone")
    assert [w.name for w in words] == ["apple"]
    assert words[0].source == SOURCE_OXFORD


def test_main_reads_file(tmp_path, monkeypatch, db_path):
    monkeypatch.setattr(seed.config, "DATABASE_PATH", db_path)
    path = tmp_path / "words.json"
    path.write_text(json.dumps([
        {"name": "river", "speech": "noun", "meaning": "Flowing water.", "example_sentences": ["The ____ ran."], "level": "A2"},
    ]), encoding="utf-8")
    assert seed.main([str(path)]) == 0
    assert SqliteWordRepository(db_path).exists_by_name("river")
    assert seed.main([]) == 2


def test_seed_catalogue_skips_malformed_entries(word_repo):
    entries = [
        {"name": "river", "speech": "noun", "meaning": 5, "example_sentences": ["The ____ ran."], "level": "A2"},
        {"name": 42, "meaning": "Number.", "example_sentences": ["x."], "level": "A1"},
        {"name": "cloud", "meaning": "Vapour.", "example_sentences": ["A ____.", 7], "level": "A1"},
        {"name": "storm", "meaning": "Weather.", "example_sentences": {"a": 1}, "level": "A1"},
        "not an object",
        {"name": "apple", "speech": "noun", "meaning": "A fruit.", "example_sentences": ["An ____."], "level": "A1"},
    ]
    assert seed.seed_catalogue(entries, word_repo) == 1
    assert [w.name for w in word_repo.list_visible_to("anyone")] == ["apple"]
