"""In-memory, append-only conversation transcript."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .errors import ConversationError

SYSTEM = "system"
USER = "user"
ASSISTANT = "assistant"
TOOL = "tool"
ROLES = (SYSTEM, USER, ASSISTANT, TOOL)


@dataclass(frozen=True)
class ToolCall:
    id: str
    name: str
    arguments: str = ""  # raw JSON text, kept verbatim

    def to_message(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: Optional[str] = None
    tool_calls: tuple[ToolCall, ...] = ()
    tool_call_id: Optional[str] = None
    name: Optional[str] = None

    def to_message(self) -> Dict[str, Any]:
        """Return an OpenAI-compatible message dict."""
        message: Dict[str, Any] = {"role": self.role}
        if self.content is not None or not self.tool_calls:
            message["content"] = self.content
        if self.tool_calls:
            message["tool_calls"] = [call.to_message() for call in self.tool_calls]
        if self.tool_call_id is not None:
            message["tool_call_id"] = self.tool_call_id
        if self.name:
            message["name"] = self.name
        return message


class Conversation:
    """Ordered message log. Messages are only ever appended."""

    def __init__(self) -> None:
        self._messages: List[ChatMessage] = []
        self._requested_ids: set[str] = set()

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self._messages)

    def __getitem__(self, index: int) -> ChatMessage:
        return self._messages[index]

    @property
    def messages(self) -> Sequence[ChatMessage]:
        return tuple(self._messages)

    def append(self, message: ChatMessage) -> ChatMessage:
        if message.role not in ROLES:
            raise ConversationError(f"Unknown message role: {message.role!r}")
        if message.tool_calls and message.role != ASSISTANT:
            raise ConversationError("Only assistant messages may request tool calls.")
        if message.role == TOOL and message.tool_call_id not in self._requested_ids:
            raise ConversationError(
                f"Tool result references unknown tool call id {message.tool_call_id!r}."
            )
        self._messages.append(message)
        self._requested_ids.update(call.id for call in message.tool_calls)
        return message

    def append_system(self, content: str) -> ChatMessage:
        return self.append(ChatMessage(role=SYSTEM, content=content))

    def append_user(self, content: str) -> ChatMessage:
        return self.append(ChatMessage(role=USER, content=content))

    def append_tool_result(self, call: ToolCall, content: str) -> ChatMessage:
        return self.append(
            ChatMessage(role=TOOL, content=content, tool_call_id=call.id, name=call.name)
        )

    def to_messages(self) -> List[Dict[str, Any]]:
        return [message.to_message() for message in self._messages]


def new_conversation(instructions: Optional[str] = None) -> Conversation:
    """Create a transcript, seeded with a system prompt when one is given."""
    conversation = Conversation()
    if instructions:
        conversation.append_system(instructions)
    return conversation


__all__ = [
    "SYSTEM",
    "USER",
    "ASSISTANT",
    "TOOL",
    "ToolCall",
    "ChatMessage",
    "Conversation",
    "new_conversation",
]
