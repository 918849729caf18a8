"""Centralized configuration helpers for the Grok CLI."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import Any, Optional, TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:  # pragma: no cover
    from openai import OpenAI


ROOT_DIR = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_FILE = ROOT_DIR / "config.json"
DEFAULT_MODEL = "grok-4"
DEFAULT_BASE_URL = "https://api.x.ai/v1"
DEFAULT_INSTRUCTIONS = "You are a helpful AI agent."
_ENV_LOADED = False


class ConfigError(RuntimeError):
    """Base exception for configuration issues."""


class MissingSettingError(ConfigError):
    """Raised when a required environment variable is missing."""


def _load_env_file() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    try:
        load_dotenv(dotenv_path=ROOT_DIR / ".env", override=False)
    except PermissionError:  # pragma: no cover - filesystem specific
        pass
    _ENV_LOADED = True


@cache
def _load_config_file() -> dict[str, Any]:
    config_path = Path(os.getenv("GROK_CLI_CONFIG", DEFAULT_CONFIG_FILE))
    if not config_path.exists():
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc


def _parse_round_trips(value: Any) -> Optional[int]:
    """``None``/empty/``0`` mean unbounded; anything else must be a positive integer."""
    if value is None or value == "":
        return None
    try:
        limit = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"max_round_trips must be an integer, got {value!r}") from exc
    if limit < 0:
        raise ConfigError(f"max_round_trips must not be negative, got {limit}")
    return limit or None


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GrokSettings:
    api_key: str
    default_model: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: Optional[float] = None


@dataclass(frozen=True)
class AgentSettings:
    instructions: str = DEFAULT_INSTRUCTIONS
    max_round_trips: Optional[int] = None
    search_mode: str = "auto"
    return_citations: bool = True


@cache
def get_grok_settings() -> GrokSettings:
    """Load Grok API configuration from config.json + env overrides."""
    _load_env_file()
    cfg = _load_config_file().get("grok", {})
    key_name = cfg.get("api_key_name", "GROK_API_KEY")

    api_key = cfg.get("api_key") or os.getenv(key_name)
    if not api_key:
        raise MissingSettingError(f"Please set the {key_name} environment variable.")

    default_model = os.getenv("GROK_MODEL") or cfg.get("model") or DEFAULT_MODEL
    base_url = os.getenv("GROK_BASE_URL") or cfg.get("base_url") or DEFAULT_BASE_URL
    timeout = cfg.get("timeout_seconds")
    return GrokSettings(
        api_key=api_key,
        default_model=default_model,
        base_url=base_url,
        timeout_seconds=float(timeout) if timeout is not None else None,
    )


@cache
def get_agent_settings() -> AgentSettings:
    _load_env_file()
    cfg = _load_config_file().get("agent", {})
    env_limit = os.getenv("GROK_MAX_ROUND_TRIPS")
    return AgentSettings(
        instructions=cfg.get("instructions") or DEFAULT_INSTRUCTIONS,
        max_round_trips=_parse_round_trips(
            env_limit if env_limit is not None else cfg.get("max_round_trips")
        ),
        search_mode=cfg.get("search_mode", "auto"),
        return_citations=_parse_bool(cfg.get("return_citations", True)),
    )


def get_openai_client() -> OpenAI:
    """Return an OpenAI SDK client pointed at the Grok endpoint, with retries disabled."""
    from openai import OpenAI

    settings = get_grok_settings()
    kwargs: dict[str, Any] = {
        "api_key": settings.api_key,
        "base_url": settings.base_url,
        "max_retries": 0,
    }
    if settings.timeout_seconds is not None:
        kwargs["timeout"] = settings.timeout_seconds
    return OpenAI(**kwargs)


__all__ = [
    "ConfigError",
    "MissingSettingError",
    "GrokSettings",
    "AgentSettings",
    "get_agent_settings",
    "get_grok_settings",
    "get_openai_client",
]
