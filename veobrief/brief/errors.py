"""
Exception types raised at the prompt-builder input boundary.

The extraction and merge core never raises; these signal an event the
boundary cannot apply (unknown slice, bad enum value, missing session).
"""

from typing import Iterable, Optional


class BriefError(Exception):
    """Base exception for all prompt-builder errors."""

    def __init__(self, message: str, error_code: str = "BRIEF_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class UnknownFieldError(BriefError):
    """Raised when an edit names a slice or field that does not exist."""

    def __init__(self, slice_id: str, field_path: Optional[str] = None):
        if field_path is None:
            message = f"Unknown slice '{slice_id}'"
        else:
            message = f"Unknown field '{field_path}' in '{slice_id}'"
        super().__init__(message, error_code="UNKNOWN_FIELD")
        self.slice_id = slice_id
        self.field_path = field_path


class InvalidFieldValueError(BriefError):
    """Raised when a value cannot be assigned to a field."""

    def __init__(self, field_path: str, value: object, allowed: Optional[Iterable[str]] = None):
        if allowed is not None:
            message = f"Invalid value {value!r} for '{field_path}'; expected one of {', '.join(allowed)}"
        else:
            message = f"Field '{field_path}' cannot be set to {value!r}"
        super().__init__(message, error_code="INVALID_VALUE")
        self.field_path = field_path
        self.value = value


class UnknownEntityKindError(BriefError):
    def __init__(self, kind: str):
        super().__init__(f"Unknown entity kind '{kind}'", error_code="UNKNOWN_KIND")
        self.kind = kind


class SessionNotFoundError(BriefError):
    def __init__(self, session_id: str):
        super().__init__(f"Session '{session_id}' not found", error_code="SESSION_NOT_FOUND")
        self.session_id = session_id
