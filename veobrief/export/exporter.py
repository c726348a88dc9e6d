from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TextIO, Tuple

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_STATUS_SECONDS = 1.8

# A sink receives the serialized prompt and may return where it was written.
Sink = Callable[[str], Optional[str]]


class ExportResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    output_path: Optional[str] = None
    num_bytes: int = 0

    class Config:
        extra = "allow"


@dataclass(frozen=True)
class CopyStatus:
    """Transient outcome of the last export; reads as idle once it expires."""

    state: str = "idle"
    message: str = ""
    expires_at: float = 0.0

    def visible_state(self, now: Optional[float] = None) -> str:
        now = time.monotonic() if now is None else now
        if self.state != "idle" and now >= self.expires_at:
            return "idle"
        return self.state

    def is_active(self, now: Optional[float] = None) -> bool:
        return self.visible_state(now) != "idle"


IDLE = CopyStatus()


def file_sink(path: str | Path) -> Sink:
    target = Path(path)

    def _write(text: str) -> Optional[str]:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        return str(target)

    return _write


def stream_sink(stream: TextIO) -> Sink:
    def _write(text: str) -> Optional[str]:
        stream.write(text)
        stream.flush()
        return None

    return _write


def export_prompt(
    text: str,
    sink: Sink,
    status_seconds: float = DEFAULT_STATUS_SECONDS,
    clock: Callable[[], float] = time.monotonic,
) -> Tuple[ExportResponse, CopyStatus]:
    """
    Hand serialized prompt text to a sink once.

    Failures are logged and reported through the returned status; they are
    never retried and never raised.
    """
    expires_at = clock() + status_seconds
    try:
        output_path = sink(text)
    except Exception as e:
        logger.exception("Failed to export prompt")
        status = CopyStatus(state="failed", message=str(e), expires_at=expires_at)
        return ExportResponse(success=False, message=f"Export failed: {e}"), status

    num_bytes = len(text.encode("utf-8"))
    logger.info("Exported prompt (%d bytes) to %s", num_bytes, output_path or "sink")
    status = CopyStatus(state="copied", message="Copied", expires_at=expires_at)
    response = ExportResponse(success=True, message="Copied", output_path=output_path, num_bytes=num_bytes)
    return response, status
