"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Credentials are read once into Settings at startup and passed
explicitly to the client factories; nothing else reads the environment.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from article_pipeline.core.errors import ConfigurationError

load_dotenv()

# OpenAI (agent LLM)
OPENAI_LLM_MODEL: str = "gpt-4o"

# Serper (Google search results as JSON)
SERPER_SEARCH_URL: str = "https://google.serper.dev/search"

# API timeouts (seconds)
SEARCH_API_TIMEOUT: float = 30.0
LLM_API_TIMEOUT: float = 120.0


@dataclass(frozen=True)
class Settings:
    """Immutable process-wide settings, built once by load_settings()."""

    openai_api_key: str
    serper_api_key: str
    openai_model: str = OPENAI_LLM_MODEL
    search_url: str = SERPER_SEARCH_URL
    search_timeout: float = SEARCH_API_TIMEOUT
    llm_timeout: float = LLM_API_TIMEOUT
    researcher_instruction: str | None = None
    writer_instruction: str | None = None


def _require_key(env: Mapping[str, str], name: str) -> str:
    """Read an API key; it ends up in an HTTP header so control chars are rejected."""
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigurationError(f"{name} is not set")
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in value):
        raise ConfigurationError(f"{name} contains characters not allowed in an HTTP header")
    return value


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def _optional_text(env: Mapping[str, str], name: str) -> str | None:
    value = (env.get(name) or "").strip()
    return value or None


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the environment (or the given mapping).

    Raises:
        ConfigurationError: If a required credential is missing or malformed,
            or a numeric setting cannot be parsed.
    """
    env = os.environ if env is None else env
    return Settings(
        openai_api_key=_require_key(env, "OPENAI_API_KEY"),
        serper_api_key=_require_key(env, "SERPER_API_KEY"),
        openai_model=(env.get("OPENAI_LLM_MODEL") or "").strip() or OPENAI_LLM_MODEL,
        search_url=(env.get("SERPER_SEARCH_URL") or "").strip() or SERPER_SEARCH_URL,
        search_timeout=_read_float(env, "SEARCH_API_TIMEOUT", SEARCH_API_TIMEOUT),
        llm_timeout=_read_float(env, "LLM_API_TIMEOUT", LLM_API_TIMEOUT),
        researcher_instruction=_optional_text(env, "RESEARCHER_SYSTEM_PROMPT"),
        writer_instruction=_optional_text(env, "WRITER_SYSTEM_PROMPT"),
    )
