"""
Prompt-builder core for cinematic video briefs.

Free-text notes are classified line by line into character and scene-beat
drafts, merged into the session's structured document, and assembled into a
JSON prompt for a video-generation model. All state is in memory.
"""

from .service import PromptBuilderSession

__all__ = ["PromptBuilderSession"]
