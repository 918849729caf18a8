"""Executable bindings from tool name to handler.

``ToolRegistry.invoke`` is a total function: every failure (unknown tool,
bad parameters, handler crash) comes back as an ``Error:``-tagged string so
the model can read it as ordinary tool output and correct itself.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Type

from pydantic import BaseModel, ValidationError

from .calculator import CalculateParams, calculate
from .catalog import CALCULATE, DEFAULT_CATALOG, READ_FILE, WRITE_FILE, ToolSpec
from .files import ReadFileParams, WriteFileParams, read_file, write_file


class CatalogMismatchError(RuntimeError):
    """Raised at startup when the advertised catalog and the bindings disagree."""


@dataclass(frozen=True)
class ToolBinding:
    name: str
    params_model: Type[BaseModel]
    handler: Callable[[Any], str]


class ToolRegistry:
    """Validated lookup from tool name to binding, checked against a catalog."""

    def __init__(self, catalog: Sequence[ToolSpec], bindings: Iterable[ToolBinding]) -> None:
        self._catalog = tuple(catalog)
        self._bindings: Dict[str, ToolBinding] = {}
        for binding in bindings:
            if binding.name in self._bindings:
                raise CatalogMismatchError(f"Duplicate binding for tool '{binding.name}'.")
            self._bindings[binding.name] = binding
        _validate_catalog(self._catalog, self._bindings)

    @property
    def catalog(self) -> tuple[ToolSpec, ...]:
        return self._catalog

    def names(self) -> List[str]:
        return [spec.name for spec in self._catalog]

    def invoke(self, name: str, parameters: Optional[Mapping[str, Any]]) -> str:
        binding = self._bindings.get(name)
        if binding is None:
            return f"Error: unknown tool '{name}'"
        try:
            params = binding.params_model.model_validate(dict(parameters or {}))
        except ValidationError as exc:
            return f"Error: invalid {_first_invalid_field(exc)}"
        try:
            return binding.handler(params)
        except Exception as exc:
            return f"Error: {type(exc).__name__}: {exc}"

    def invoke_json(self, name: str, arguments: Optional[str]) -> str:
        """Decode raw JSON arguments as sent by the model, then ``invoke``."""
        if not arguments:
            return self.invoke(name, {})
        try:
            payload = json.loads(arguments)
        except json.JSONDecodeError as exc:
            return f"Error: invalid arguments: {exc}"
        if not isinstance(payload, dict):
            return "Error: invalid arguments: expected a JSON object"
        return self.invoke(name, payload)


def _first_invalid_field(exc: ValidationError) -> str:
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc:
            return str(loc[0])
    return "parameters"


def _validate_catalog(catalog: Sequence[ToolSpec], bindings: Mapping[str, ToolBinding]) -> None:
    seen: set[str] = set()
    for spec in catalog:
        if spec.name in seen:
            raise CatalogMismatchError(f"Tool '{spec.name}' is declared more than once.")
        seen.add(spec.name)
        binding = bindings.get(spec.name)
        if binding is None:
            raise CatalogMismatchError(f"Tool '{spec.name}' is advertised but has no binding.")
        fields = set(binding.params_model.model_fields)
        missing = [param for param in spec.required if param not in fields]
        if missing:
            raise CatalogMismatchError(
                f"Tool '{spec.name}' requires {', '.join(missing)} but its binding does not accept them."
            )
    unadvertised = sorted(set(bindings) - seen)
    if unadvertised:
        raise CatalogMismatchError(f"Bindings without a catalog entry: {', '.join(unadvertised)}.")


DEFAULT_BINDINGS: tuple[ToolBinding, ...] = (
    ToolBinding(CALCULATE.name, CalculateParams, calculate),
    ToolBinding(READ_FILE.name, ReadFileParams, read_file),
    ToolBinding(WRITE_FILE.name, WriteFileParams, write_file),
)


def build_default_registry() -> ToolRegistry:
    return ToolRegistry(DEFAULT_CATALOG, DEFAULT_BINDINGS)


__all__ = [
    "CatalogMismatchError",
    "ToolBinding",
    "ToolRegistry",
    "DEFAULT_BINDINGS",
    "build_default_registry",
]
