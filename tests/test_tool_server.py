from __future__ import annotations

import asyncio
from pathlib import Path

from fastmcp import Client

from tool_server import server


def _call(name: str, arguments: dict) -> str:
    async def _run() -> str:
        async with Client(server) as client:
            result = await client.call_tool(name, arguments)
        return "\n".join(getattr(block, "text", "") for block in result.content)

    return asyncio.run(_run())


def test_server_lists_catalog_tools() -> None:
    async def _run():
        async with Client(server) as client:
            return await client.list_tools()

    names = sorted(tool.name for tool in asyncio.run(_run()))
    assert names == ["calculate", "read_file", "write_file"]


def test_server_delegates_to_registry(tmp_path: Path) -> None:
    target = tmp_path / "mcp.txt"

    assert _call("calculate", {"expression": "2 + 2"}) == "4"
    assert _call("calculate", {"expression": "10 / 0"}).startswith("Error:")
    assert _call("write_file", {"path": str(target), "content": "via mcp"}) == "File written successfully"
    assert _call("read_file", {"path": str(target)}) == "via mcp"
