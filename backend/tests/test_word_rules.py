from wordquiz.domain.word.models import SOURCE_CUSTOM
from wordquiz.domain.word.rules import clean_word_name, split_example_sentences, validate_word_content
from wordquiz.domain.word.service import WordDomainService


def _data(**overrides):
    data = {
        "name": "Ice Cream",
        "speech": "Noun",
        "meaning": "A frozen dessert.",
        "example_sentences": ["I love ____.", "The ____ melted."],
        "level": "a2",
    }
    data.update(overrides)
    return data


def test_clean_word_name():
    assert clean_word_name("  Ice Cream ") == "icecream"
    assert clean_word_name("") == ""
    assert clean_word_name(None) == ""


def test_split_example_sentences():
    assert split_example_sentences("First one. Second one! Third?") == ["First one.", "Second one!", "Third?"]
    assert split_example_sentences("") == []


def test_validate_normalises_fields():
    result = validate_word_content(_data())
    assert result.is_success
    assert result.value["name"] == "icecream"
    assert result.value["speech"] == "noun"
    assert result.value["level"] == "A2"


def test_validate_accepts_sentence_block():
    result = validate_word_content(_data(example_sentences="One. Two."))
    assert result.value["example_sentences"] == ["One.", "Two."]


def test_validate_failures():
    assert not validate_word_content(_data(name="   ")).is_success
    assert not validate_word_content(_data(meaning="")).is_success
    assert not validate_word_content(_data(example_sentences=[])).is_success
    bad_level = validate_word_content(_data(level="D1"))
    assert not bad_level.is_success
    assert "not a valid level" in bad_level.error


def test_create_word_builds_custom_item():
    result = WordDomainService().create_word("alice", _data())
    assert result.is_success
    word = result.value
    assert word.id is None
    assert word.source == SOURCE_CUSTOM
    assert word.owner_id == "alice"
    assert word.created_at


def test_validate_rejects_non_text_fields():
    assert not validate_word_content(_data(meaning=5)).is_success
    assert not validate_word_content(_data(name=["ice"])).is_success
    assert not validate_word_content(_data(speech=3)).is_success
    assert not validate_word_content(_data(example_sentences=["ok.", None])).is_success
    assert not validate_word_content(_data(level=2)).is_success
    assert not validate_word_content("not a dict").is_success
