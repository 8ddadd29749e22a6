"""Conversation transcript management.

Responsibilities:
    - Append-only, chronological message list
    - One API call per submission, with loading and error flags
    - Change notification so the UI can render entries as they arrive

Contains no rendering code.
"""

from src.transcript.controller import EXAMPLE_QUESTIONS, TranscriptController

__all__ = ["EXAMPLE_QUESTIONS", "TranscriptController"]
