from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from veobrief.export.exporter import DEFAULT_STATUS_SECONDS, IDLE, CopyStatus, ExportResponse, Sink, export_prompt
from veobrief.utils.logging_setup import log_context

from . import state as reducers
from .assemble import build_prompt_structure, format_prompt_structure
from .defaults import default_state
from .models import PromptStructure, SessionState

logger = logging.getLogger(__name__)


@dataclass
class PromptBuilderSession:
    """
    Owner of one prompt-builder session.

    Every event is applied by a pure reducer from veobrief.brief.state and the
    result replaces the held state in a single assignment, so callers never
    observe a half-applied edit. The snapshot is rebuilt on every read.
    """

    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    state: SessionState = field(default_factory=default_state)
    copy_status: CopyStatus = IDLE
    status_seconds: float = DEFAULT_STATUS_SECONDS
    clock: Callable[[], float] = time.monotonic

    def _apply(self, action: str, reducer: Callable[..., SessionState], *args: Any) -> SessionState:
        with log_context(session_id=self.session_id, action=action):
            self.state = reducer(self.state, *args)
            logger.debug("Applied %s", action)
        return self.state

    # --- singleton slices ---
    def update_field(self, slice_id: str, field_path: str, value: Any) -> SessionState:
        return self._apply("update_field", reducers.update_field, slice_id, field_path, value)

    # --- characters ---
    def add_character(self) -> SessionState:
        return self._apply("add_character", reducers.add_entity, "character")

    def update_character(self, character_id: str, field_path: str, value: Any) -> SessionState:
        return self._apply("update_character", reducers.update_character, character_id, field_path, value)

    def remove_character(self, character_id: str) -> SessionState:
        return self._apply("remove_character", reducers.remove_entity, "character", character_id)

    # --- scene beats ---
    def add_scene_beat(self) -> SessionState:
        return self._apply("add_scene_beat", reducers.add_entity, "beat")

    def update_scene_beat(self, beat_id: str, field_path: str, value: Any) -> SessionState:
        return self._apply("update_scene_beat", reducers.update_scene_beat, beat_id, field_path, value)

    def remove_scene_beat(self, beat_id: str) -> SessionState:
        return self._apply("remove_scene_beat", reducers.remove_entity, "beat", beat_id)

    # --- whole document ---
    def organize_ideas(self, raw_text: Optional[str] = None) -> SessionState:
        """
        Extract characters and beats from notes and merge them in.
        Falls back to the project's brain dump when no text is given.
        """
        text = self.state.project.brain_dump if raw_text is None else raw_text
        with log_context(session_id=self.session_id, action="organize_ideas"):
            before = self.state
            self.state = reducers.run_extraction(before, text)
            if self.state is before:
                logger.info("Nothing to organize")
            else:
                logger.info(
                    "Organized ideas: %d characters, %d beats",
                    len(self.state.characters),
                    len(self.state.scene_beats),
                )
        return self.state

    def reset(self) -> SessionState:
        with log_context(session_id=self.session_id, action="reset"):
            self.state = reducers.reset_state()
            logger.info("Session reset to defaults")
        return self.state

    def snapshot(self) -> PromptStructure:
        return build_prompt_structure(self.state)

    def to_json(self) -> str:
        return format_prompt_structure(self.snapshot())

    def copy_prompt(self, sink: Sink) -> ExportResponse:
        with log_context(session_id=self.session_id, action="copy_prompt"):
            response, self.copy_status = export_prompt(
                self.to_json(),
                sink,
                status_seconds=self.status_seconds,
                clock=self.clock,
            )
        return response

    def visible_copy_status(self) -> str:
        return self.copy_status.visible_state(self.clock())

    def describe(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "copy_status": self.visible_copy_status(),
            "prompt": self.snapshot().to_dict(),
        }
