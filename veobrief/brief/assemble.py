from __future__ import annotations

import json

from .defaults import DIRECTOR_NOTES
from .models import PromptStructure, SessionState


def build_prompt_structure(state: SessionState) -> PromptStructure:
    return PromptStructure(
        project=state.project,
        visual_language=state.visual_language,
        characters=state.characters,
        scene_beats=state.scene_beats,
        audio=state.audio,
        generation_settings=state.generation_settings,
        director_notes=DIRECTOR_NOTES,
    )


def format_prompt_structure(prompt: PromptStructure) -> str:
    """
    Serialize a snapshot to the text handed to the video model.

    Keys keep record declaration order and non-ASCII text is written as is,
    so the same snapshot always yields the same bytes.
    """
    return json.dumps(prompt.to_dict(), indent=2, ensure_ascii=False)


def prompt_structure_to_json(state: SessionState) -> str:
    return format_prompt_structure(build_prompt_structure(state))
