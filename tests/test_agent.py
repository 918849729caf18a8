from __future__ import annotations

from pathlib import Path

import pytest

from agent import ChatAgent
from chat.errors import ModelServiceError
from chat.session_store import ToolCall
from conftest import ScriptedModelService, final_reply, tool_reply


def test_agent_seeds_system_prompt_and_keeps_history() -> None:
    service = ScriptedModelService([final_reply("first"), final_reply("second")])
    agent = ChatAgent(model_service=service)

    assert agent.respond("one")["text"] == "first"
    assert agent.respond("two")["text"] == "second"

    assert [m.role for m in agent.conversation] == ["system", "user", "assistant", "user", "assistant"]
    assert agent.conversation[0].content == "You are a helpful AI agent."
    assert [m.content for m in service.requests[1]][-1] == "two"


def test_agent_writes_and_reads_through_tools(tmp_path: Path) -> None:
    target = tmp_path / "hello.txt"
    service = ScriptedModelService(
        [
            tool_reply(
                ToolCall(
                    id="w",
                    name="write_file",
                    arguments='{"path": "%s", "content": "hello"}' % target.as_posix(),
                )
            ),
            tool_reply(ToolCall(id="r", name="read_file", arguments='{"path": "%s"}' % target.as_posix())),
            final_reply("The file says hello."),
        ]
    )
    agent = ChatAgent(model_service=service)

    response = agent.respond("write hello then read it back")

    assert response["text"] == "The file says hello."
    assert [call["response"] for call in response["tool_calls"]] == ["File written successfully", "hello"]


def test_history_survives_failed_utterance() -> None:
    class _Flaky(ScriptedModelService):
        def next_reply(self):
            if self.call_count == 1:
                raise ModelServiceError("connection reset")
            return super().next_reply()

    agent = ChatAgent(model_service=_Flaky([final_reply("recovered")]))

    with pytest.raises(ModelServiceError):
        agent.respond("first try")
    assert agent.respond("second try")["text"] == "recovered"
    assert [m.content for m in agent.conversation if m.role == "user"] == ["first try", "second try"]


def test_agent_round_trip_bound_is_injectable() -> None:
    from chat.errors import ToolLoopLimitError
    from conftest import EndlessToolService

    agent = ChatAgent(model_service=EndlessToolService(), max_round_trips=2)
    with pytest.raises(ToolLoopLimitError):
        agent.respond("loop")
