from __future__ import annotations

from typing import Any, Dict, Optional

from veobrief.export.exporter import Sink, file_sink

from .errors import SessionNotFoundError, UnknownEntityKindError
from .service import PromptBuilderSession


_sessions: Dict[str, PromptBuilderSession] = {}


def _session(session_id: str) -> PromptBuilderSession:
    try:
        return _sessions[session_id]
    except KeyError:
        raise SessionNotFoundError(session_id) from None


def _prompt_payload(session: PromptBuilderSession) -> Dict[str, Any]:
    return {"session_id": session.session_id, "prompt": session.snapshot().to_dict()}


def brief_open_session(session_id: Optional[str] = None, status_seconds: Optional[float] = None) -> Dict[str, Any]:
    """
    Create a session holding the default document, or return the existing one.
    """
    if session_id and session_id in _sessions:
        return _prompt_payload(_sessions[session_id])
    kwargs: Dict[str, Any] = {}
    if session_id:
        kwargs["session_id"] = session_id
    if status_seconds is not None:
        kwargs["status_seconds"] = status_seconds
    session = PromptBuilderSession(**kwargs)
    _sessions[session.session_id] = session
    return _prompt_payload(session)


def brief_close_session(session_id: str) -> Dict[str, Any]:
    _session(session_id)
    del _sessions[session_id]
    return {"session_id": session_id, "closed": True}


def brief_get_prompt(session_id: str) -> Dict[str, Any]:
    return _session(session_id).describe()


def brief_get_prompt_json(session_id: str) -> str:
    return _session(session_id).to_json()


def brief_update_field(session_id: str, slice_id: str, field: str, value: Any) -> Dict[str, Any]:
    """
    Edit one field of the project, visualLanguage, audio or generationSettings slice.
    """
    session = _session(session_id)
    session.update_field(slice_id, field, value)
    return _prompt_payload(session)


def brief_update_character(session_id: str, character_id: str, field: str, value: Any) -> Dict[str, Any]:
    session = _session(session_id)
    session.update_character(character_id, field, value)
    return _prompt_payload(session)


def brief_update_scene_beat(session_id: str, beat_id: str, field: str, value: Any) -> Dict[str, Any]:
    session = _session(session_id)
    session.update_scene_beat(beat_id, field, value)
    return _prompt_payload(session)


def brief_add_entity(session_id: str, kind: str) -> Dict[str, Any]:
    """
    Append a default character or beat. kind: "character" | "beat".
    """
    session = _session(session_id)
    if kind == "character":
        session.add_character()
    elif kind == "beat":
        session.add_scene_beat()
    else:
        raise UnknownEntityKindError(kind)
    return _prompt_payload(session)


def brief_remove_entity(session_id: str, kind: str, entity_id: str) -> Dict[str, Any]:
    session = _session(session_id)
    if kind == "character":
        session.remove_character(entity_id)
    elif kind == "beat":
        session.remove_scene_beat(entity_id)
    else:
        raise UnknownEntityKindError(kind)
    return _prompt_payload(session)


def brief_organize_ideas(session_id: str, raw_text: Optional[str] = None) -> Dict[str, Any]:
    """
    Run idea extraction over raw_text (or the project's brain dump) and merge the result.
    """
    session = _session(session_id)
    session.organize_ideas(raw_text)
    return _prompt_payload(session)


def brief_reset(session_id: str) -> Dict[str, Any]:
    session = _session(session_id)
    session.reset()
    return _prompt_payload(session)


def brief_copy_prompt(session_id: str, sink: Optional[Sink] = None, export_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Export the current prompt JSON through a sink (default: a file at export_path).
    """
    session = _session(session_id)
    if sink is None:
        if not export_path:
            raise ValueError("either sink or export_path is required")
        sink = file_sink(export_path)
    response = session.copy_prompt(sink)
    return {
        "session_id": session_id,
        "copy_status": session.visible_copy_status(),
        "export": response.model_dump(),
    }
