"""Tool catalog and registry."""

from __future__ import annotations

from .calculator import calculate
from .catalog import DEFAULT_CATALOG, ToolSpec, get_tool_spec
from .files import read_file, write_file
from .registry import (
    DEFAULT_BINDINGS,
    CatalogMismatchError,
    ToolBinding,
    ToolRegistry,
    build_default_registry,
)

__all__ = [
    # Catalog
    "DEFAULT_CATALOG",
    "ToolSpec",
    "get_tool_spec",
    # Registry
    "DEFAULT_BINDINGS",
    "CatalogMismatchError",
    "ToolBinding",
    "ToolRegistry",
    "build_default_registry",
    # Tools
    "calculate",
    "read_file",
    "write_file",
]
