from dataclasses import replace

from veobrief.brief.extract import beat_timestamp, extract_ideas, split_lines

NOTES = "Hero: calm visionary leader\nScene 1: Rooftop reveal at dawn\nShe looks at the skyline and smiles"


def _without_ids(items):
    return [replace(item, id="") for item in items]


def test_extracts_characters_and_beats_from_notes():
    result = extract_ideas(NOTES)

    assert len(result.characters) == 1
    hero = result.characters[0]
    assert hero.name == "Hero"
    assert hero.role == "Hero: calm visionary leader"
    assert hero.backstory == hero.wardrobe == hero.consistency_keys == ""

    assert [b.label for b in result.beats] == ["Scene 1", "Beat 2"]
    assert [b.objective for b in result.beats] == [
        "Scene 1: Rooftop reveal at dawn",
        "She looks at the skyline and smiles",
    ]
    assert [b.timestamp for b in result.beats] == ["0s - 5s", "5s - 10s"]
    assert all(b.setting == b.voice_over == "" for b in result.beats)


def test_empty_input_yields_nothing():
    for raw in ("", None, "\n\n   \n"):
        result = extract_ideas(raw)
        assert result.characters == ()
        assert result.beats == ()
        assert result.is_empty


def test_short_lines_are_dropped():
    result = extract_ideas("dawn\nneon\nHero: lead")
    assert [c.name for c in result.characters] == ["Hero"]
    assert result.beats == ()


def test_timestamps_follow_beat_order_not_line_order():
    raw = "Hero: x\nScene A: one\nVillain: y\nok\nShot B - two"
    result = extract_ideas(raw)
    assert [b.label for b in result.beats] == ["Scene A", "Shot B"]
    assert [b.timestamp for b in result.beats] == ["0s - 5s", "5s - 10s"]
    assert [c.name for c in result.characters] == ["Hero", "Villain"]


def test_fallback_character_names_use_unfiltered_line_index():
    raw = "first hero line\n   \nsecond villain"
    result = extract_ideas(raw)
    assert [c.name for c in result.characters] == ["Character 1", "Character 3"]


def test_split_lines_trims_and_keeps_original_positions():
    assert split_lines("\n\n  a  \n \nb") == [(1, "a"), (3, "b")]


def test_extraction_is_deterministic_modulo_ids():
    first = extract_ideas(NOTES)
    second = extract_ideas(NOTES)
    assert _without_ids(first.characters) == _without_ids(second.characters)
    assert _without_ids(first.beats) == _without_ids(second.beats)


def test_each_draft_gets_a_fresh_id():
    result = extract_ideas(NOTES + "\nVillain: cold\nScene 9: finale")
    ids = [c.id for c in result.characters] + [b.id for b in result.beats]
    assert all(ids)
    assert len(set(ids)) == len(ids)


def test_beat_timestamp():
    assert beat_timestamp(0) == "0s - 5s"
    assert beat_timestamp(3) == "15s - 20s"
