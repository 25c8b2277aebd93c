"""
Environment-driven provider configuration.

Env resolution:
  - GEMINI_API_KEY wins over ANTHROPIC_API_KEY; neither means template mode.
  - DISH_PROMPT_<PROVIDER>_MODEL overrides the default model id (LiteLLM provider-prefixed).
  - DSPY_LLM_TIMEOUT_SEC / DSPY_TEMPERATURE / DSPY_SPEC_MAX_TOKENS tune the LM call.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

DEFAULT_MODELS: Dict[str, str] = {
    "gemini": "gemini/gemini-2.0-flash",
    "anthropic": "anthropic/claude-sonnet-4-20250514",
}
DEFAULT_VISION_MODEL = "gemini/gemini-2.5-flash"

# Rate-limit backoff base per backend (doubles per attempt).
BASE_RETRY_DELAY_SEC: Dict[str, float] = {
    "gemini": 10.0,
    "anthropic": 5.0,
}

API_KEY_ENV: Dict[str, str] = {
    "gemini": "GEMINI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def _env(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def env_int(name: str, default: int, env: Optional[Mapping[str, str]] = None) -> int:
    raw = str(_env(env).get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float, env: Optional[Mapping[str, str]] = None) -> float:
    raw = str(_env(env).get(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool = False, env: Optional[Mapping[str, str]] = None) -> bool:
    v = str(_env(env).get(name) or "").strip().lower()
    if not v:
        return default
    return v in {"1", "true", "yes", "y", "on"}


def active_llm_provider(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    e = _env(env)
    for name in ("gemini", "anthropic"):
        if str(e.get(API_KEY_ENV[name]) or "").strip():
            return name
    return None


def resolve_llm_config(provider: str, env: Optional[Mapping[str, str]] = None) -> Optional[Dict[str, str]]:
    """
    Return `{provider, model, apiKey}` for a remote backend, or None if its key is not configured.
    """
    name = str(provider or "").strip().lower()
    if name not in API_KEY_ENV:
        return None
    e = _env(env)
    api_key = str(e.get(API_KEY_ENV[name]) or "").strip()
    if not api_key:
        return None
    model = str(e.get(f"DISH_PROMPT_{name.upper()}_MODEL") or "").strip() or DEFAULT_MODELS[name]
    return {"provider": name, "model": model, "apiKey": api_key}


def resolve_vision_model(env: Optional[Mapping[str, str]] = None) -> str:
    return str(_env(env).get("DISH_PROMPT_VISION_MODEL") or "").strip() or DEFAULT_VISION_MODEL


__all__ = [
    "API_KEY_ENV",
    "BASE_RETRY_DELAY_SEC",
    "DEFAULT_MODELS",
    "DEFAULT_VISION_MODEL",
    "active_llm_provider",
    "env_bool",
    "env_float",
    "env_int",
    "resolve_llm_config",
    "resolve_vision_model",
]
