"""Errors raised while resolving an utterance."""

from __future__ import annotations


class ChatError(RuntimeError):
    """Base exception for failures that abandon the current utterance."""


class ModelServiceError(ChatError):
    """The model service could not be reached or answered with a non-success status."""


class ModelResponseError(ModelServiceError):
    """The model service answered, but the response could not be decoded."""


class ToolLoopLimitError(ChatError):
    """The model kept requesting tools past the configured round-trip bound."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Tool-call limit of {limit} round-trip(s) reached before a final answer.")


class ConversationError(ChatError):
    """A message would break the transcript's ordering invariants."""


__all__ = [
    "ChatError",
    "ModelServiceError",
    "ModelResponseError",
    "ToolLoopLimitError",
    "ConversationError",
]
