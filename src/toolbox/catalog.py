"""Static tool declarations advertised to the model service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    parameters: Dict[str, Any] = field(default_factory=dict)

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(self.parameters.get("required") or ())

    def to_openai(self) -> Dict[str, Any]:
        """Return an OpenAI-compatible function tool declaration."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters
                or {
                    "type": "object",
                    "properties": {},
                    "additionalProperties": False,
                },
            },
        }


def _string_param(description: str) -> Dict[str, str]:
    return {"type": "string", "description": description}


CALCULATE = ToolSpec(
    name="calculate",
    description="Execute simple math expressions.",
    parameters={
        "type": "object",
        "properties": {
            "expression": _string_param("The math expression to evaluate (e.g., '2 + 2')."),
        },
        "required": ["expression"],
    },
)

READ_FILE = ToolSpec(
    name="read_file",
    description="Read the contents of a file.",
    parameters={
        "type": "object",
        "properties": {
            "path": _string_param("The path to the file to read."),
        },
        "required": ["path"],
    },
)

WRITE_FILE = ToolSpec(
    name="write_file",
    description="Write content to a file.",
    parameters={
        "type": "object",
        "properties": {
            "path": _string_param("The path to the file to write."),
            "content": _string_param("The content to write to the file."),
        },
        "required": ["path", "content"],
    },
)

# Add more tools here and bind them in toolbox.registry.
DEFAULT_CATALOG: tuple[ToolSpec, ...] = (CALCULATE, READ_FILE, WRITE_FILE)


def get_tool_spec(name: str, catalog: Sequence[ToolSpec] = DEFAULT_CATALOG) -> Optional[ToolSpec]:
    for spec in catalog:
        if spec.name == name:
            return spec
    return None


__all__ = [
    "ToolSpec",
    "CALCULATE",
    "READ_FILE",
    "WRITE_FILE",
    "DEFAULT_CATALOG",
    "get_tool_spec",
]
