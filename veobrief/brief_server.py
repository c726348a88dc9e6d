import logging
import traceback
from datetime import datetime
from typing import Any, Callable, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from veobrief.brief import tools
from veobrief.brief.errors import BriefError, SessionNotFoundError
from veobrief.config.config import load_config
from veobrief.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)

config = load_config()

app = FastAPI(title="Veo Brief API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SessionRequest(BaseModel):
    session_id: Optional[str] = None


class FieldEdit(BaseModel):
    slice: str
    field: str
    value: Any = None


class EntityFieldEdit(BaseModel):
    field: str
    value: Any = None


class OrganizeRequest(BaseModel):
    rawText: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str


def _call(fn: Callable[..., Any], *args: Any) -> Any:
    """
    Run a tool function, translating prompt-builder errors into HTTP errors.
    """
    try:
        return fn(*args)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except BriefError as e:
        raise HTTPException(status_code=422, detail={"error_code": e.error_code, "message": e.message})
    except Exception as e:
        logger.error(f"Error in {getattr(fn, '__name__', fn)}: {e}")
        logger.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail=str(e))


# Handlers are async so that every session event runs to completion on the
# event loop before the next one starts.

@app.post("/sessions")
async def open_session(request: Optional[SessionRequest] = None):
    session_id = request.session_id if request else None
    return _call(tools.brief_open_session, session_id, config["copy_status_seconds"])


@app.delete("/sessions/{session_id}")
async def close_session(session_id: str):
    return _call(tools.brief_close_session, session_id)


@app.get("/sessions/{session_id}/prompt")
async def get_prompt(session_id: str):
    return _call(tools.brief_get_prompt, session_id)


@app.get("/sessions/{session_id}/prompt.json", response_class=PlainTextResponse)
async def get_prompt_json(session_id: str):
    text = _call(tools.brief_get_prompt_json, session_id)
    return PlainTextResponse(text, media_type="application/json; charset=utf-8")


@app.patch("/sessions/{session_id}/fields")
async def update_field(session_id: str, edit: FieldEdit):
    return _call(tools.brief_update_field, session_id, edit.slice, edit.field, edit.value)


@app.post("/sessions/{session_id}/characters")
async def add_character(session_id: str):
    return _call(tools.brief_add_entity, session_id, "character")


@app.patch("/sessions/{session_id}/characters/{character_id}")
async def update_character(session_id: str, character_id: str, edit: EntityFieldEdit):
    return _call(tools.brief_update_character, session_id, character_id, edit.field, edit.value)


@app.delete("/sessions/{session_id}/characters/{character_id}")
async def remove_character(session_id: str, character_id: str):
    return _call(tools.brief_remove_entity, session_id, "character", character_id)


@app.post("/sessions/{session_id}/beats")
async def add_scene_beat(session_id: str):
    return _call(tools.brief_add_entity, session_id, "beat")


@app.patch("/sessions/{session_id}/beats/{beat_id}")
async def update_scene_beat(session_id: str, beat_id: str, edit: EntityFieldEdit):
    return _call(tools.brief_update_scene_beat, session_id, beat_id, edit.field, edit.value)


@app.delete("/sessions/{session_id}/beats/{beat_id}")
async def remove_scene_beat(session_id: str, beat_id: str):
    return _call(tools.brief_remove_entity, session_id, "beat", beat_id)


@app.post("/sessions/{session_id}/organize")
async def organize_ideas(session_id: str, request: Optional[OrganizeRequest] = None):
    raw_text = request.rawText if request else None
    return _call(tools.brief_organize_ideas, session_id, raw_text)


@app.post("/sessions/{session_id}/reset")
async def reset(session_id: str):
    return _call(tools.brief_reset, session_id)


@app.post("/sessions/{session_id}/copy")
async def copy_prompt(session_id: str):
    # the export target is server configuration; clients never choose it
    return _call(tools.brief_copy_prompt, session_id, None, config["export_path"])


@app.get("/health")
async def health():
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat()
    )


@app.get("/")
async def root():
    return {"message": "Veo Brief API is running"}


def main():
    import uvicorn

    configure_logging(
        log_file=config["log_file"],
        level=config["log_level"],
        enable_console=config["log_console"],
    )
    logger.info("Starting Veo Brief API on %s:%s", config["server_host"], config["server_port"])
    uvicorn.run(app, host=config["server_host"], port=config["server_port"])


if __name__ == "__main__":
    main()
