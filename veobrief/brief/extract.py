"""
Heuristic idea extraction.

Turns a free-text brain dump into character and scene-beat drafts. Each line
is run through an ordered rule table; the first rule whose predicate matches
decides the entity kind, so character vocabulary wins over beat vocabulary.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .models import Character, SceneBeat, new_entity_id

CHARACTER_KEYWORDS = re.compile(r"character|protagonist|hero|villain|support|actor|founder")
BEAT_KEYWORDS = re.compile(r"scene|shot|moment|sequence|beat|transition")
MIN_FALLBACK_LENGTH = 12
BEAT_SECONDS = 5

_LINE_SPLIT = re.compile(r"\n+")
_LEADING_NAME = re.compile(r"^[A-Z][A-Za-z0-9_\s]+(?=[:\-])")
_TRAILING_CLAUSE = re.compile(r"[:\-].*")


class EntityKind(enum.Enum):
    CHARACTER = "character"
    BEAT = "beat"


@dataclass(frozen=True)
class CharacterCandidate:
    name: str
    role: str


@dataclass(frozen=True)
class BeatCandidate:
    label: str
    objective: str


@dataclass(frozen=True)
class NoMatch:
    pass


ClassificationResult = Union[CharacterCandidate, BeatCandidate, NoMatch]


def _has_character_keyword(line: str, lower: str) -> bool:
    return CHARACTER_KEYWORDS.search(lower) is not None


def _has_beat_keyword(line: str, lower: str) -> bool:
    return BEAT_KEYWORDS.search(lower) is not None


def _is_long_enough(line: str, lower: str) -> bool:
    return len(line) > MIN_FALLBACK_LENGTH


def _character_from(line: str, position_index: int, beat_count: int) -> CharacterCandidate:
    match = _LEADING_NAME.match(line)
    name = match.group(0).strip() if match else f"Character {position_index + 1}"
    return CharacterCandidate(name=name, role=line)


def _keyword_beat_from(line: str, position_index: int, beat_count: int) -> BeatCandidate:
    label = _TRAILING_CLAUSE.sub("", line, count=1).strip()
    return BeatCandidate(label=label or f"Beat {beat_count + 1}", objective=line)


def _fallback_beat_from(line: str, position_index: int, beat_count: int) -> BeatCandidate:
    return BeatCandidate(label=f"Beat {beat_count + 1}", objective=line)


Predicate = Callable[[str, str], bool]
Builder = Callable[[str, int, int], ClassificationResult]

# Evaluated top to bottom, first match wins.
CLASSIFIER_RULES: Tuple[Tuple[Predicate, EntityKind, Builder], ...] = (
    (_has_character_keyword, EntityKind.CHARACTER, _character_from),
    (_has_beat_keyword, EntityKind.BEAT, _keyword_beat_from),
    (_is_long_enough, EntityKind.BEAT, _fallback_beat_from),
)


def classify_line(line: str, position_index: int, beat_count: int = 0) -> ClassificationResult:
    """
    Classify one line of notes.

    position_index numbers the fallback character name, beat_count (beats
    extracted before this line) numbers the fallback beat label.
    """
    line = (line or "").strip()
    if not line:
        return NoMatch()
    lower = line.lower()
    for predicate, _kind, build in CLASSIFIER_RULES:
        if predicate(line, lower):
            return build(line, position_index, beat_count)
    return NoMatch()


def classify_kind(line: str) -> Optional[EntityKind]:
    line = (line or "").strip()
    if not line:
        return None
    lower = line.lower()
    for predicate, kind, _build in CLASSIFIER_RULES:
        if predicate(line, lower):
            return kind
    return None


def beat_timestamp(index: int) -> str:
    return f"{index * BEAT_SECONDS}s - {(index + 1) * BEAT_SECONDS}s"


@dataclass(frozen=True)
class IdeasParseResult:
    characters: Tuple[Character, ...] = ()
    beats: Tuple[SceneBeat, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.characters and not self.beats


def split_lines(raw_text: Optional[str]) -> List[Tuple[int, str]]:
    """Return (index in the unfiltered split, trimmed line) for every non-blank line."""
    segments = _LINE_SPLIT.split(raw_text or "")
    return [(index, seg.strip()) for index, seg in enumerate(segments) if seg.strip()]


def extract_ideas(raw_text: Optional[str]) -> IdeasParseResult:
    characters: List[Character] = []
    beats: List[SceneBeat] = []

    for index, line in split_lines(raw_text):
        result = classify_line(line, index, beat_count=len(beats))
        if isinstance(result, CharacterCandidate):
            characters.append(Character(id=new_entity_id(), name=result.name, role=result.role))
        elif isinstance(result, BeatCandidate):
            beats.append(
                SceneBeat(
                    id=new_entity_id(),
                    label=result.label,
                    timestamp=beat_timestamp(len(beats)),
                    objective=result.objective,
                )
            )

    return IdeasParseResult(characters=tuple(characters), beats=tuple(beats))
