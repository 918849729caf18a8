"""Conversation state and the tool-call resolution loop."""

from __future__ import annotations

from .errors import (
    ChatError,
    ConversationError,
    ModelResponseError,
    ModelServiceError,
    ToolLoopLimitError,
)
from .model_client import GrokModelService, ModelReply, ModelService
from .session_store import ChatMessage, Conversation, ToolCall, new_conversation
from .tool_loop import run_chat_with_tools

__all__ = [
    "ChatError",
    "ConversationError",
    "ModelResponseError",
    "ModelServiceError",
    "ToolLoopLimitError",
    "GrokModelService",
    "ModelReply",
    "ModelService",
    "ChatMessage",
    "Conversation",
    "ToolCall",
    "new_conversation",
    "run_chat_with_tools",
]
