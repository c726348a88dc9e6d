import pytest

from veobrief.brief import state as reducers
from veobrief.brief.assemble import prompt_structure_to_json
from veobrief.brief.defaults import SEED_BEAT_ID, SEED_CHARACTER_ID, default_state
from veobrief.brief.errors import InvalidFieldValueError, UnknownEntityKindError, UnknownFieldError


def test_update_field_accepts_both_spellings():
    state = default_state()
    a = reducers.update_field(state, "project", "targetEmotion", "Dread")
    b = reducers.update_field(state, "project", "target_emotion", "Dread")
    assert a == b
    assert a.project.target_emotion == "Dread"

    c = reducers.update_field(state, "visualLanguage", "textureAndFX", "Clean digital")
    assert c.visual_language.texture_and_fx == "Clean digital"
    d = reducers.update_field(state, "generation_settings", "seedControl", "Random")
    assert d.generation_settings.seed_control == "Random"


def test_update_field_does_not_mutate_input():
    state = default_state()
    reducers.update_field(state, "audio", "music", "Solo piano")
    assert state == default_state()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("30", 30),
        (" 12 ", 12),
        ("45s", 45),
        ("3.7", 3),
        ("-5", -5),
        ("abc", 0),
        ("", 0),
        (None, 0),
        (7.9, 7),
        (True, 0),
        (90, 90),
        ("9" * 5000, 0),
    ],
)
def test_runtime_seconds_coercion(raw, expected):
    state = reducers.update_field(default_state(), "project", "runtimeSeconds", raw)
    assert state.project.runtime_seconds == expected


def test_enumerated_fields_reject_unknown_values():
    state = default_state()
    assert reducers.update_field(state, "project", "aspectRatio", "9:16").project.aspect_ratio == "9:16"
    with pytest.raises(InvalidFieldValueError):
        reducers.update_field(state, "project", "aspectRatio", "4:3")
    with pytest.raises(InvalidFieldValueError):
        reducers.update_field(state, "generationSettings", "renderQuality", "max")


def test_unknown_slice_or_field_raises():
    state = default_state()
    with pytest.raises(UnknownFieldError):
        reducers.update_field(state, "characters", "name", "x")
    with pytest.raises(UnknownFieldError):
        reducers.update_field(state, "project", "director", "x")


def test_update_character_and_beat_fields():
    state = default_state()
    state = reducers.update_character(state, SEED_CHARACTER_ID, "wardrobe", "Raincoat")
    state = reducers.update_scene_beat(state, SEED_BEAT_ID, "emotionalBeat", "Hope")
    assert state.characters[0].wardrobe == "Raincoat"
    assert state.scene_beats[0].emotional_beat == "Hope"


def test_entity_id_is_immutable():
    with pytest.raises(InvalidFieldValueError):
        reducers.update_character(default_state(), SEED_CHARACTER_ID, "id", "other")


def test_editing_a_missing_entity_is_a_no_op():
    state = default_state()
    assert reducers.update_character(state, "gone", "name", "x") == state
    assert reducers.update_scene_beat(state, "gone", "label", "x") == state


def test_add_entities_use_defaults():
    state = reducers.add_entity(default_state(), "character")
    new = state.characters[-1]
    assert (new.name, new.role, new.backstory) == ("New Character", "Supporting role", "")
    assert new.id != SEED_CHARACTER_ID

    state = reducers.add_entity(state, "beat")
    beat = state.scene_beats[-1]
    assert (beat.label, beat.timestamp, beat.objective) == ("Beat 2", "", "")


def test_remove_entity():
    state = reducers.add_entity(default_state(), "character")
    added_id = state.characters[-1].id

    state = reducers.remove_entity(state, "character", SEED_CHARACTER_ID)
    assert [c.id for c in state.characters] == [added_id]

    # the last remaining card stays
    assert reducers.remove_entity(state, "character", added_id) is state
    assert reducers.remove_entity(state, "beat", SEED_BEAT_ID).scene_beats[0].id == SEED_BEAT_ID
    assert reducers.remove_entity(state, "character", "missing") is state


def test_unknown_entity_kind_raises():
    with pytest.raises(UnknownEntityKindError):
        reducers.add_entity(default_state(), "prop")
    with pytest.raises(UnknownEntityKindError):
        reducers.remove_entity(default_state(), "prop", "x")


def test_run_extraction_on_blank_text_keeps_state():
    state = default_state()
    assert reducers.run_extraction(state, "") is state
    assert reducers.run_extraction(state, "   \n  ") is state
    assert reducers.run_extraction(state, None) is state


def test_run_extraction_applies_merge_policy():
    state = reducers.run_extraction(
        default_state(),
        "Hero: calm visionary leader\nScene 1: Rooftop reveal at dawn\nShe looks at the skyline and smiles",
    )
    assert [c.name for c in state.characters] == ["Hero"]
    assert [b.label for b in state.scene_beats] == ["Scene 1", "Beat 2"]


def test_reset_restores_exact_default_document():
    state = default_state()
    state = reducers.update_field(state, "project", "title", "Changed")
    state = reducers.add_entity(state, "beat")
    state = reducers.run_extraction(state, "Villain: cold strategist\nScene 4: chase")

    fresh = reducers.reset_state()
    assert fresh == default_state()
    assert prompt_structure_to_json(fresh) == prompt_structure_to_json(default_state())
