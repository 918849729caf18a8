"""Arithmetic evaluation behind the ``calculate`` tool."""

from __future__ import annotations

import ast
import math
import operator
from typing import Any, Callable, Dict

from pydantic import BaseModel, Field


class CalculationError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


class CalculateParams(BaseModel):
    expression: str = Field(description="The math expression to evaluate (e.g., '2 + 2').")


_BINARY_OPS: Dict[type, Callable[[float, float], Any]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.Mod: math.fmod,
    ast.Pow: operator.pow,
}

_UNARY_OPS: Dict[type, Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

_OPERATOR_SYMBOLS = {
    ast.BitXor: "^",
    ast.BitAnd: "&",
    ast.BitOr: "|",
    ast.LShift: "<<",
    ast.RShift: ">>",
    ast.FloorDiv: "//",
    ast.MatMult: "@",
    ast.Invert: "~",
    ast.Not: "not",
}


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression with no variable bindings.

    Supports numeric literals, ``+ - * / % **``, unary signs and parentheses.
    All arithmetic is done in floating point.
    """
    try:
        tree = ast.parse(expression.strip(), mode="eval")
    except (SyntaxError, ValueError) as exc:
        raise CalculationError(f"malformed expression: {expression!r}") from exc
    try:
        result = _eval_node(tree.body)
    except RecursionError as exc:
        raise CalculationError("expression is too deeply nested") from exc
    if not math.isfinite(result):
        raise CalculationError("result is not finite")
    return result


def _eval_node(node: ast.AST) -> float:
    if isinstance(node, ast.Constant):
        value = node.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise CalculationError(f"unsupported literal: {value!r}")
        try:
            return float(value)
        except OverflowError as exc:
            raise CalculationError("numeric overflow") from exc

    if isinstance(node, ast.UnaryOp):
        op = _UNARY_OPS.get(type(node.op))
        if op is None:
            raise CalculationError(f"unsupported operator: {_symbol(node.op)}")
        return op(_eval_node(node.operand))

    if isinstance(node, ast.BinOp):
        op = _BINARY_OPS.get(type(node.op))
        if op is None:
            raise CalculationError(f"unsupported operator: {_symbol(node.op)}")
        left = _eval_node(node.left)
        right = _eval_node(node.right)
        # math.fmod truncates like C and raises ValueError, not ZeroDivisionError, on a zero divisor.
        if isinstance(node.op, ast.Mod) and right == 0:
            raise CalculationError("division by zero")
        try:
            result = op(left, right)
        except ZeroDivisionError as exc:
            raise CalculationError("division by zero") from exc
        except OverflowError as exc:
            raise CalculationError("numeric overflow") from exc
        # A negative base raised to a fractional power yields a complex number.
        if isinstance(result, complex):
            raise CalculationError("result is not a real number")
        return result

    if isinstance(node, ast.Name):
        raise CalculationError(f"unknown name: {node.id}")

    raise CalculationError(f"unsupported syntax: {type(node).__name__}")


def _symbol(op: ast.AST) -> str:
    return _OPERATOR_SYMBOLS.get(type(op), type(op).__name__)


def format_number(value: float) -> str:
    """Render a result the way a person would write it: ``4`` rather than ``4.0``."""
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def calculate(params: CalculateParams) -> str:
    try:
        return format_number(evaluate(params.expression))
    except CalculationError as exc:
        return f"Error: {exc}"


__all__ = [
    "CalculateParams",
    "CalculationError",
    "calculate",
    "evaluate",
    "format_number",
]
