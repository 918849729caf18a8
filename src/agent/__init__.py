"""Agent entrypoints for the Grok CLI."""

from __future__ import annotations

from .chat import ChatAgent
from .cli import main, run_chat

__all__ = [
    "ChatAgent",
    "main",
    "run_chat",
]
