"""Round-trip driver: resolves one utterance through zero or more tool exchanges."""

from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List, Optional

from toolbox.registry import ToolRegistry

from .errors import ToolLoopLimitError
from .model_client import ModelService
from .session_store import Conversation

_DEBUG_ENABLED = os.getenv("GROK_CLI_DEBUG") == "1"


def _debug_log(label: str, payload: Any) -> None:
    if not _DEBUG_ENABLED:
        return
    try:
        serialized = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    except TypeError:
        serialized = str(payload)
    print(f"[tool_loop][debug] {label}:\n{serialized}\n", file=sys.stderr)


def run_chat_with_tools(
    conversation: Conversation,
    *,
    model_service: ModelService,
    registry: ToolRegistry,
    max_round_trips: Optional[int] = None,
) -> Dict[str, Any]:
    """Exchange with the model until it answers without requesting tools.

    The final assistant message is appended to ``conversation`` verbatim. Tool
    results are appended in the order the calls were requested. With
    ``max_round_trips=None`` the loop runs for as long as the model keeps
    asking for tools; otherwise ``ToolLoopLimitError`` is raised once the
    bound is spent. Model service errors propagate and leave everything
    appended so far in place.
    """
    tool_summaries: List[Dict[str, Any]] = []
    round_trips = 0

    while True:
        if max_round_trips is not None and round_trips >= max_round_trips:
            raise ToolLoopLimitError(max_round_trips)

        _debug_log("conversation.before_request", conversation.to_messages())
        reply = model_service.complete(conversation.messages, registry.catalog)
        round_trips += 1
        conversation.append(reply.message)

        if not reply.requests_tools:
            _debug_log("assistant.final_message", reply.message.content)
            return {
                "assistant_message": reply.message,
                "tool_calls": tool_summaries,
                "citations": reply.citations,
                "round_trips": round_trips,
            }

        for call in reply.message.tool_calls:
            result = registry.invoke_json(call.name, call.arguments)
            _debug_log(f"tool.{call.name}.response", {"args": call.arguments, "payload": result})
            conversation.append_tool_result(call, result)
            tool_summaries.append(
                {
                    "id": call.id,
                    "name": call.name,
                    "arguments": call.arguments,
                    "response": result,
                }
            )


__all__ = ["run_chat_with_tools"]
