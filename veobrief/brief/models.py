from __future__ import annotations

import uuid
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple


ASPECT_RATIOS = ("16:9", "9:16", "21:9", "1:1")
BUDGET_LEVELS = ("indie", "premium", "blockbuster")
MOTION_INTENSITIES = ("static", "cinematic", "hyperdynamic")
RENDER_QUALITIES = ("standard", "high", "ultra")

SEED_CHARACTER_NAME = "Primary Protagonist"


def new_entity_id() -> str:
    return uuid.uuid4().hex[:10]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.upper() if part == "fx" else part.capitalize() for part in rest)


def record_to_dict(record: Any) -> Dict[str, Any]:
    """Serialize a record with camelCase keys in field declaration order."""
    return {_camel(f.name): getattr(record, f.name) for f in fields(record)}


def field_aliases(record_type: type) -> Dict[str, str]:
    """Map both the camelCase and snake_case spelling of every field to its attribute."""
    aliases: Dict[str, str] = {}
    for f in fields(record_type):
        aliases[f.name] = f.name
        aliases[_camel(f.name)] = f.name
    return aliases


@dataclass(frozen=True)
class ProjectInfo:
    title: str = ""
    logline: str = ""
    brain_dump: str = ""
    runtime_seconds: int = 0
    aspect_ratio: str = "16:9"
    target_emotion: str = ""
    pacing: str = ""
    call_to_action: str = ""
    budget_level: str = "blockbuster"


@dataclass(frozen=True)
class VisualLanguage:
    cinematography_style: str = ""
    lighting: str = ""
    color_palette: str = ""
    art_direction: str = ""
    camera_movement: str = ""
    lensing: str = ""
    texture_and_fx: str = ""
    references: str = ""


@dataclass(frozen=True)
class Character:
    id: str = field(default_factory=new_entity_id)
    name: str = ""
    role: str = ""
    backstory: str = ""
    visual_traits: str = ""
    wardrobe: str = ""
    performance_notes: str = ""
    consistency_keys: str = ""


@dataclass(frozen=True)
class SceneBeat:
    id: str = field(default_factory=new_entity_id)
    label: str = ""
    timestamp: str = ""
    objective: str = ""
    setting: str = ""
    action: str = ""
    emotional_beat: str = ""
    cinematography: str = ""
    transitions: str = ""
    voice_over: str = ""


@dataclass(frozen=True)
class AudioDirection:
    voice_over_tone: str = ""
    dialogue_notes: str = ""
    music: str = ""
    sound_design: str = ""


@dataclass(frozen=True)
class GenerationSettings:
    motion_intensity: str = "cinematic"
    camera_rig: str = ""
    render_quality: str = "ultra"
    seed_control: str = ""
    negative_prompts: str = ""
    delivery_format: str = ""


@dataclass(frozen=True)
class SessionState:
    project: ProjectInfo
    visual_language: VisualLanguage
    characters: Tuple[Character, ...]
    scene_beats: Tuple[SceneBeat, ...]
    audio: AudioDirection
    generation_settings: GenerationSettings


@dataclass(frozen=True)
class PromptStructure:
    project: ProjectInfo
    visual_language: VisualLanguage
    characters: Tuple[Character, ...]
    scene_beats: Tuple[SceneBeat, ...]
    audio: AudioDirection
    generation_settings: GenerationSettings
    director_notes: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project": record_to_dict(self.project),
            "visualLanguage": record_to_dict(self.visual_language),
            "characters": [record_to_dict(c) for c in self.characters],
            "sceneBeats": [record_to_dict(b) for b in self.scene_beats],
            "audio": record_to_dict(self.audio),
            "generationSettings": record_to_dict(self.generation_settings),
            "directorNotes": self.director_notes,
        }
