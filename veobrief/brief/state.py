"""
Pure state transitions for a prompt-builder session.

Every function takes the current SessionState and returns the next one; none
of them mutate their input.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

from .defaults import NEW_CHARACTER_NAME, NEW_CHARACTER_ROLE, default_state
from .errors import InvalidFieldValueError, UnknownEntityKindError, UnknownFieldError
from .extract import extract_ideas
from .models import (
    ASPECT_RATIOS,
    BUDGET_LEVELS,
    MOTION_INTENSITIES,
    RENDER_QUALITIES,
    AudioDirection,
    Character,
    GenerationSettings,
    ProjectInfo,
    SceneBeat,
    SessionState,
    VisualLanguage,
    field_aliases,
)
from .reconcile import reconcile

logger = logging.getLogger(__name__)

# slice name (both spellings) -> SessionState attribute
SLICES: Dict[str, str] = {
    "project": "project",
    "visualLanguage": "visual_language",
    "visual_language": "visual_language",
    "audio": "audio",
    "generationSettings": "generation_settings",
    "generation_settings": "generation_settings",
}

_SLICE_TYPES = {
    "project": ProjectInfo,
    "visual_language": VisualLanguage,
    "audio": AudioDirection,
    "generation_settings": GenerationSettings,
}

CHOICES: Dict[str, Tuple[str, ...]] = {
    "aspect_ratio": ASPECT_RATIOS,
    "budget_level": BUDGET_LEVELS,
    "motion_intensity": MOTION_INTENSITIES,
    "render_quality": RENDER_QUALITIES,
}

ENTITY_KINDS = ("character", "beat")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
# matches the default int-from-string limit of current interpreters
MAX_RUNTIME_DIGITS = 4300


def coerce_runtime_seconds(value: Any) -> int:
    """Parse a leading integer the way a lenient form field would; anything else becomes 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match or len(match.group(1).lstrip("+-")) > MAX_RUNTIME_DIGITS:
        return 0
    return int(match.group(1))


def _resolve_field(record_type: type, slice_id: str, field_path: str) -> str:
    attr = field_aliases(record_type).get(field_path)
    if attr is None:
        raise UnknownFieldError(slice_id, field_path)
    return attr


def _coerce_value(attr: str, value: Any) -> Any:
    if attr == "runtime_seconds":
        return coerce_runtime_seconds(value)
    if attr in CHOICES:
        if value not in CHOICES[attr]:
            raise InvalidFieldValueError(attr, value, allowed=CHOICES[attr])
        return value
    return "" if value is None else str(value)


def update_field(state: SessionState, slice_id: str, field_path: str, value: Any) -> SessionState:
    attr_name = SLICES.get(slice_id)
    if attr_name is None:
        raise UnknownFieldError(slice_id)
    current = getattr(state, attr_name)
    attr = _resolve_field(_SLICE_TYPES[attr_name], slice_id, field_path)
    updated = replace(current, **{attr: _coerce_value(attr, value)})
    return replace(state, **{attr_name: updated})


def _entity_attr(record_type: type, kind: str, field_path: str) -> str:
    attr = _resolve_field(record_type, kind, field_path)
    if attr == "id":
        raise InvalidFieldValueError("id", field_path)
    return attr


def update_character(state: SessionState, character_id: str, field_path: str, value: Any) -> SessionState:
    attr = _entity_attr(Character, "character", field_path)
    text = "" if value is None else str(value)
    characters = tuple(
        replace(c, **{attr: text}) if c.id == character_id else c for c in state.characters
    )
    return replace(state, characters=characters)


def update_scene_beat(state: SessionState, beat_id: str, field_path: str, value: Any) -> SessionState:
    attr = _entity_attr(SceneBeat, "beat", field_path)
    text = "" if value is None else str(value)
    beats = tuple(replace(b, **{attr: text}) if b.id == beat_id else b for b in state.scene_beats)
    return replace(state, scene_beats=beats)


def _check_kind(kind: str) -> str:
    if kind not in ENTITY_KINDS:
        raise UnknownEntityKindError(kind)
    return kind


def add_entity(state: SessionState, kind: str) -> SessionState:
    if _check_kind(kind) == "character":
        new = Character(name=NEW_CHARACTER_NAME, role=NEW_CHARACTER_ROLE)
        return replace(state, characters=state.characters + (new,))
    new_beat = SceneBeat(label=f"Beat {len(state.scene_beats) + 1}")
    return replace(state, scene_beats=state.scene_beats + (new_beat,))


def remove_entity(state: SessionState, kind: str, entity_id: str) -> SessionState:
    attr_name = "characters" if _check_kind(kind) == "character" else "scene_beats"
    current = getattr(state, attr_name)
    remaining = tuple(item for item in current if item.id != entity_id)
    if len(remaining) == len(current):
        return state
    if not remaining:
        logger.warning("Refusing to remove the last %s (%s)", kind, entity_id)
        return state
    return replace(state, **{attr_name: remaining})


def run_extraction(state: SessionState, raw_text: Optional[str]) -> SessionState:
    if not (raw_text or "").strip():
        return state
    parsed = extract_ideas(raw_text)
    logger.debug("Extracted %d characters and %d beats", len(parsed.characters), len(parsed.beats))
    return reconcile(state, parsed)


def reset_state() -> SessionState:
    return default_state()
