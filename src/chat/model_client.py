"""Model service boundary: an OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, Sequence

import openai

from toolbox.catalog import ToolSpec

from .errors import ModelResponseError, ModelServiceError
from .session_store import ASSISTANT, ChatMessage, ToolCall

if TYPE_CHECKING:
    from openai import OpenAI


@dataclass(frozen=True)
class ModelReply:
    """First choice of a completion plus any live-search citations."""

    message: ChatMessage
    finish_reason: Optional[str] = None
    citations: List[str] = field(default_factory=list)

    @property
    def requests_tools(self) -> bool:
        return bool(self.message.tool_calls)


class ModelService(Protocol):
    def complete(self, messages: Sequence[ChatMessage], tools: Sequence[ToolSpec]) -> ModelReply:
        ...


def _convert_tool_calls(tool_calls: Optional[Sequence[Any]]) -> tuple[ToolCall, ...]:
    if not tool_calls:
        return ()
    converted: List[ToolCall] = []
    for call in tool_calls:
        function = getattr(call, "function", None)
        converted.append(
            ToolCall(
                id=getattr(call, "id", None) or "",
                name=(getattr(function, "name", None) if function else None) or "",
                arguments=(getattr(function, "arguments", None) if function else None) or "",
            )
        )
    return tuple(converted)


def _convert_citations(raw: Any) -> List[str]:
    if not raw:
        return []
    citations: List[str] = []
    for item in raw:
        if isinstance(item, str):
            citations.append(item)
        elif isinstance(item, dict) and item.get("url"):
            citations.append(str(item["url"]))
    return citations


def reply_from_completion(response: Any) -> ModelReply:
    """Turn a chat completion object into a ``ModelReply``, keeping only the first choice."""
    choices = getattr(response, "choices", None)
    if not choices:
        raise ModelResponseError("Model response missing choices")
    choice = choices[0]
    message = getattr(choice, "message", None)
    if message is None:
        raise ModelResponseError("Model response choice missing message")

    chat_message = ChatMessage(
        role=getattr(message, "role", None) or ASSISTANT,
        content=getattr(message, "content", None),
        tool_calls=_convert_tool_calls(getattr(message, "tool_calls", None)),
    )
    return ModelReply(
        message=chat_message,
        finish_reason=getattr(choice, "finish_reason", None),
        citations=_convert_citations(getattr(response, "citations", None)),
    )


class GrokModelService:
    """Sends the transcript and tool catalog to Grok with automatic tool choice and live search."""

    def __init__(
        self,
        client: OpenAI,
        *,
        model: str,
        search_mode: str = "auto",
        return_citations: bool = True,
    ) -> None:
        self._client = client
        self.model = model
        self.search_mode = search_mode
        self.return_citations = return_citations

    def build_request(
        self, messages: Sequence[ChatMessage], tools: Sequence[ToolSpec]
    ) -> Dict[str, Any]:
        request: Dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_message() for message in messages],
            "extra_body": {
                "search_parameters": {
                    "mode": self.search_mode,
                    "return_citations": self.return_citations,
                }
            },
        }
        if tools:
            request["tools"] = [spec.to_openai() for spec in tools]
            request["tool_choice"] = "auto"
        return request

    def complete(self, messages: Sequence[ChatMessage], tools: Sequence[ToolSpec]) -> ModelReply:
        request = self.build_request(messages, tools)
        try:
            response = self._client.chat.completions.create(**request)
        except openai.APIStatusError as exc:
            raise ModelServiceError(f"{exc.status_code} {exc.message}") from exc
        except openai.APIResponseValidationError as exc:
            raise ModelResponseError(f"Error decoding response: {exc}") from exc
        except openai.APIError as exc:
            raise ModelServiceError(f"Error sending request: {exc}") from exc
        except ValueError as exc:
            # The SDK lets json.JSONDecodeError escape for a malformed JSON body.
            raise ModelResponseError(f"Error decoding response: {exc}") from exc
        return reply_from_completion(response)


__all__ = [
    "ModelReply",
    "ModelService",
    "GrokModelService",
    "reply_from_completion",
]
