from __future__ import annotations

from dataclasses import replace
from typing import Sequence, Tuple

from .extract import IdeasParseResult
from .models import SEED_CHARACTER_NAME, Character, SceneBeat, SessionState


def merge_characters(existing: Sequence[Character], drafts: Sequence[Character]) -> Tuple[Character, ...]:
    """
    Append drafts after the existing roster, evicting the seed placeholder.

    Only characters still named like the seed protagonist are dropped; every
    other existing character keeps its position and values.
    """
    if not drafts:
        return tuple(existing)
    remaining = [c for c in existing if c.name != SEED_CHARACTER_NAME]
    return tuple(remaining) + tuple(drafts)


def merge_scene_beats(existing: Sequence[SceneBeat], drafts: Sequence[SceneBeat]) -> Tuple[SceneBeat, ...]:
    """Replace the whole timeline with the drafts; keep it when there are none."""
    if not drafts:
        return tuple(existing)
    return tuple(drafts)


def reconcile(state: SessionState, parsed: IdeasParseResult) -> SessionState:
    if parsed.is_empty:
        return state
    return replace(
        state,
        characters=merge_characters(state.characters, parsed.characters),
        scene_beats=merge_scene_beats(state.scene_beats, parsed.beats),
    )
