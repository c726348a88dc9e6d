import pytest

from veobrief.brief.extract import (
    BeatCandidate,
    CharacterCandidate,
    EntityKind,
    NoMatch,
    classify_kind,
    classify_line,
)


def test_character_name_from_leading_phrase():
    result = classify_line("Hero: calm visionary leader", 0)
    assert result == CharacterCandidate(name="Hero", role="Hero: calm visionary leader")


def test_character_name_with_dash_separator():
    result = classify_line("Ada Lovelace - founder of the lab", 4)
    assert result == CharacterCandidate(name="Ada Lovelace", role="Ada Lovelace - founder of the lab")


def test_character_name_allows_unicode_whitespace():
    line = "Hero\xa0Two: lead"
    assert classify_line(line, 0) == CharacterCandidate(name="Hero\xa0Two", role=line)


def test_character_name_letters_stay_ascii():
    result = classify_line("H\u00e9ro the hero: lead", 0)
    assert result.name == "Character 1"


@pytest.mark.parametrize(
    "line",
    [
        "the villain lurks in the alley",
        "Maya, the hero: brave and tired",
        "A supporting actor without separator",
    ],
)
def test_character_name_falls_back_to_position(line):
    result = classify_line(line, 3)
    assert isinstance(result, CharacterCandidate)
    assert result.name == "Character 4"
    assert result.role == line


def test_character_keyword_wins_over_beat_keyword():
    line = "Hero enters the scene in a slow shot"
    assert isinstance(classify_line(line, 0), CharacterCandidate)
    assert classify_kind(line) is EntityKind.CHARACTER


def test_short_keyword_lines_still_match():
    assert isinstance(classify_line("hero", 0), CharacterCandidate)
    assert classify_line("Shot", 0, beat_count=0) == BeatCandidate(label="Shot", objective="Shot")


def test_beat_label_strips_trailing_clause():
    result = classify_line("Scene 1: Rooftop reveal at dawn", 1)
    assert result == BeatCandidate(label="Scene 1", objective="Scene 1: Rooftop reveal at dawn")

    result = classify_line("Wide shot - city wakes up", 0)
    assert result.label == "Wide shot"


def test_beat_label_falls_back_when_stripping_empties_it():
    result = classify_line(": transition to black", 5, beat_count=2)
    assert result == BeatCandidate(label="Beat 3", objective=": transition to black")


def test_long_line_without_keywords_becomes_numbered_beat():
    result = classify_line("She looks at the skyline and smiles", 2, beat_count=1)
    assert result == BeatCandidate(label="Beat 2", objective="She looks at the skyline and smiles")


def test_fallback_beat_label_is_not_stripped():
    result = classify_line("Sunrise: city glows gold", 0, beat_count=0)
    assert result.label == "Beat 1"


@pytest.mark.parametrize("line", ["dawn light", "abcdefghijkl", "x", "   "])
def test_short_lines_without_keywords_do_not_match(line):
    assert classify_line(line, 0) == NoMatch()
    assert classify_kind(line) is None


def test_thirteen_characters_is_long_enough():
    assert isinstance(classify_line("abcdefghijklm", 0), BeatCandidate)


def test_classification_is_pure():
    first = classify_line("Villain: cold strategist", 7, beat_count=3)
    second = classify_line("Villain: cold strategist", 7, beat_count=3)
    assert first == second
