"""Chat agent that owns the transcript and drives the tool loop."""

from __future__ import annotations

from typing import Any, Dict, Optional

from app_config import DEFAULT_INSTRUCTIONS
from chat.model_client import ModelService
from chat.session_store import Conversation, new_conversation
from chat.tool_loop import run_chat_with_tools
from toolbox.registry import ToolRegistry, build_default_registry


class ChatAgent:
    """Small wrapper that keeps the in-memory conversation and calls the tool loop."""

    def __init__(
        self,
        *,
        model_service: ModelService,
        registry: Optional[ToolRegistry] = None,
        instructions: Optional[str] = DEFAULT_INSTRUCTIONS,
        max_round_trips: Optional[int] = None,
    ) -> None:
        self.model_service = model_service
        self.registry = registry or build_default_registry()
        self.max_round_trips = max_round_trips
        self.conversation: Conversation = new_conversation(instructions)

    @classmethod
    def from_settings(
        cls,
        *,
        model: Optional[str] = None,
        max_round_trips: Optional[int] = None,
    ) -> "ChatAgent":
        """Build the production agent from config.json / environment settings."""
        from app_config import get_agent_settings, get_grok_settings, get_openai_client
        from chat.model_client import GrokModelService

        agent_settings = get_agent_settings()
        service = GrokModelService(
            get_openai_client(),
            model=model or get_grok_settings().default_model,
            search_mode=agent_settings.search_mode,
            return_citations=agent_settings.return_citations,
        )
        return cls(
            model_service=service,
            instructions=agent_settings.instructions,
            max_round_trips=max_round_trips if max_round_trips is not None else agent_settings.max_round_trips,
        )

    def respond(self, user_message: str) -> Dict[str, Any]:
        """Take one user turn, resolve it, and return the assistant's answer."""
        self.conversation.append_user(user_message)
        result = run_chat_with_tools(
            self.conversation,
            model_service=self.model_service,
            registry=self.registry,
            max_round_trips=self.max_round_trips,
        )
        return {
            "text": result["assistant_message"].content,
            "tool_calls": result["tool_calls"],
            "citations": result["citations"],
        }
