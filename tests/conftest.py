from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import pytest

from chat.model_client import ModelReply
from chat.session_store import ASSISTANT, ChatMessage, ToolCall
from toolbox.catalog import ToolSpec
from toolbox.registry import build_default_registry


def final_reply(content: str, citations: Optional[List[str]] = None) -> ModelReply:
    return ModelReply(
        message=ChatMessage(role=ASSISTANT, content=content),
        finish_reason="stop",
        citations=list(citations or []),
    )


def tool_reply(*calls: ToolCall, content: Optional[str] = None) -> ModelReply:
    return ModelReply(
        message=ChatMessage(role=ASSISTANT, content=content, tool_calls=tuple(calls)),
        finish_reason="tool_calls",
    )


class CallLimitExceeded(AssertionError):
    pass


class ScriptedModelService:
    """Replays canned replies and records the transcript sent with every request."""

    def __init__(self, replies: Iterable[ModelReply] = (), *, max_calls: int = 50) -> None:
        self._replies = list(replies)
        self.max_calls = max_calls
        self.requests: List[List[ChatMessage]] = []
        self.tools_seen: List[Sequence[ToolSpec]] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def next_reply(self) -> ModelReply:
        return self._replies.pop(0)

    def complete(self, messages: Sequence[ChatMessage], tools: Sequence[ToolSpec]) -> ModelReply:
        if self.call_count >= self.max_calls:
            raise CallLimitExceeded(f"model service called more than {self.max_calls} times")
        self.requests.append(list(messages))
        self.tools_seen.append(tools)
        return self.next_reply()


class EndlessToolService(ScriptedModelService):
    """Always asks for another calculation."""

    def next_reply(self) -> ModelReply:
        n = self.call_count
        return tool_reply(ToolCall(id=f"call_{n}", name="calculate", arguments='{"expression": "1 + 1"}'))


@pytest.fixture()
def registry():
    return build_default_registry()


@pytest.fixture()
def clean_settings(monkeypatch, tmp_path):
    """Isolate app_config from the developer's .env, config.json and cached settings."""
    import app_config

    monkeypatch.setattr(app_config, "_ENV_LOADED", True)
    monkeypatch.setenv("GROK_CLI_CONFIG", str(tmp_path / "config.json"))
    for name in ("GROK_API_KEY", "GROK_MODEL", "GROK_BASE_URL", "GROK_MAX_ROUND_TRIPS"):
        monkeypatch.delenv(name, raising=False)

    def _clear() -> None:
        app_config._load_config_file.cache_clear()
        app_config.get_grok_settings.cache_clear()
        app_config.get_agent_settings.cache_clear()

    _clear()
    yield tmp_path / "config.json"
    _clear()
