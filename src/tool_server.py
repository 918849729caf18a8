"""FastMCP server exposing the Grok CLI's local tools to other MCP clients."""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP

from toolbox.catalog import CALCULATE, READ_FILE, WRITE_FILE
from toolbox.registry import build_default_registry

registry = build_default_registry()

server = FastMCP(
    name="grok-cli-tools",
    instructions=(
        "Expose the Grok CLI's local tools: evaluate arithmetic expressions and read or write files."
    ),
)


@server.tool(name=CALCULATE.name, description=CALCULATE.description)
def calculate(
    expression: Annotated[str, "The math expression to evaluate (e.g., '2 + 2')."],
) -> str:
    return registry.invoke(CALCULATE.name, {"expression": expression})


@server.tool(name=READ_FILE.name, description=READ_FILE.description)
def read_file(
    path: Annotated[str, "The path to the file to read."],
) -> str:
    return registry.invoke(READ_FILE.name, {"path": path})


@server.tool(name=WRITE_FILE.name, description=WRITE_FILE.description)
def write_file(
    path: Annotated[str, "The path to the file to write."],
    content: Annotated[str, "The content to write to the file."],
) -> str:
    return registry.invoke(WRITE_FILE.name, {"path": path, "content": content})


if __name__ == "__main__":
    server.run()
