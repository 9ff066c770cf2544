"""Flatten chat messages into a plain transcript for prompting."""

from typing import Iterable

from models.requests import ChatMessage
from services.errors import EmptyTranscriptError

TRANSCRIPT_ROLES = ("user", "assistant")
NON_TEXT_PLACEHOLDER = "[Non-text content]"


def _message_text(message: ChatMessage) -> str:
    return " ".join(
        part.text if part.type == "text" else NON_TEXT_PLACEHOLDER
        for part in message.parts
    )


def build_transcript(messages: Iterable[ChatMessage]) -> str:
    """Render user/assistant messages as ``ROLE: text`` blocks.

    Raises EmptyTranscriptError when the retained messages carry no text
    beyond whitespace; role labels alone do not count as content.
    """
    turns = [
        (msg.role, _message_text(msg))
        for msg in messages
        if msg.role in TRANSCRIPT_ROLES
    ]
    if not any(text.strip() for _, text in turns):
        raise EmptyTranscriptError()
    return "\n\n".join(f"{role.upper()}: {text}" for role, text in turns)
