"""
Hosted-model spec providers (Anthropic, Gemini) with retry and template fallback.

Attempt policy (max 3 attempts):
  - rate limited (HTTP 429): sleep `base_delay * 2**attempt`, retry
  - other 4xx: fall back to the template builder immediately
  - transport errors, 5xx, empty or non-JSON payloads: retry
  - JSON that fails PromptSpec validation: fall back immediately
`generate_spec` never raises; the worst case is the deterministic template spec.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

import anyio
import dspy
from pydantic import ValidationError

from programs.prompt_engine.spec_builder import build_spec, request_model_hints
from programs.spec_generator.parsing import extract_json_object
from programs.spec_generator.program import SpecGeneratorProgram
from programs.spec_generator.prompts import build_dish_brief
from providers.base import LocalSpecProvider, SpecProvider
from providers.config import BASE_RETRY_DELAY_SEC, active_llm_provider, env_float, env_int, resolve_llm_config
from schemas.prompt_spec import GeneratorInput, PromptSpec

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3

SleepFn = Callable[[float], Awaitable[Any]]


def error_status_code(exc: BaseException) -> Optional[int]:
    """HTTP status carried by a LiteLLM / httpx style exception, if any."""
    status = getattr(exc, "status_code", None)
    if status is None and getattr(exc, "response", None) is not None:
        status = getattr(exc.response, "status_code", None)  # type: ignore[attr-defined]
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


class RemoteSpecProvider:
    """
    One hosted backend. `program` is the DSPy spec generator; tests pass a stub with the same
    call shape (`program(dish_brief=...) -> prediction with .spec_json`).
    """

    def __init__(
        self,
        *,
        name: str,
        model: str,
        api_key: str,
        base_delay_sec: float,
        max_attempts: int = MAX_ATTEMPTS,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        timeout_sec: float = 20.0,
        program: Optional[Callable[..., Any]] = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self.name = name
        self.model = model
        self.base_delay_sec = base_delay_sec
        self.max_attempts = max(1, int(max_attempts))
        self._api_key = api_key
        self._lm_kwargs: Dict[str, Any] = {
            "temperature": temperature,
            "max_tokens": max_tokens,
            "timeout": timeout_sec,
        }
        self._program = program or SpecGeneratorProgram()
        self._sleep = sleep
        self._lm: Any = None

    def _get_lm(self) -> Any:
        if self._lm is None:
            # Retries are ours; LiteLLM's own retry loop would hide the 429s. A retry must reach the
            # backend, so the response cache stays off.
            self._lm = dspy.LM(
                model=self.model, api_key=self._api_key, num_retries=0, cache=False, **self._lm_kwargs
            )
        return self._lm

    def _request_raw(self, dish_brief: str) -> str:
        with dspy.context(lm=self._get_lm()):
            pred = self._program(dish_brief=dish_brief)
        return str(getattr(pred, "spec_json", None) or "")

    @staticmethod
    def _pin_request_fields(spec: PromptSpec, inp: GeneratorInput) -> PromptSpec:
        hints = dict(spec.model_hints)
        hints.update(request_model_hints(inp))
        update: Dict[str, Any] = {"model_hints": hints}
        if not spec.reference_image_url and inp.reference_image_url:
            update["reference_image_url"] = inp.reference_image_url
        return spec.model_copy(update=update)

    def _fallback(self, inp: GeneratorInput, reason: str) -> PromptSpec:
        logger.warning("[SpecProvider:%s] using template spec: %s", self.name, reason)
        return build_spec(inp)

    async def generate_spec(self, inp: GeneratorInput) -> PromptSpec:
        dish_brief = build_dish_brief(inp)

        for attempt in range(self.max_attempts):
            label = f"attempt {attempt + 1}/{self.max_attempts}"
            try:
                raw = await anyio.to_thread.run_sync(self._request_raw, dish_brief)
            except Exception as e:
                status = error_status_code(e)
                if status == 429:
                    if attempt + 1 < self.max_attempts:
                        delay = self.base_delay_sec * (2**attempt)
                        logger.warning("[SpecProvider:%s] rate limited (%s), retrying in %.1fs", self.name, label, delay)
                        await self._sleep(delay)
                    else:
                        logger.warning("[SpecProvider:%s] rate limited (%s)", self.name, label)
                    continue
                if status is not None and 400 <= status < 500:
                    return self._fallback(inp, f"client error {status}: {type(e).__name__}")
                logger.warning("[SpecProvider:%s] request failed (%s): %s: %s", self.name, label, type(e).__name__, e)
                continue

            obj = extract_json_object(raw)
            if obj is None:
                logger.warning("[SpecProvider:%s] no JSON object in response (%s): %r", self.name, label, raw[:200])
                continue

            try:
                spec = PromptSpec.model_validate(obj)
            except ValidationError as e:
                return self._fallback(inp, f"invalid spec JSON ({e.error_count()} errors)")

            return self._pin_request_fields(spec, inp)

        return self._fallback(inp, f"all {self.max_attempts} attempts failed")


def make_remote_provider(provider: str, env: Optional[Mapping[str, str]] = None, **kwargs: Any) -> Optional[RemoteSpecProvider]:
    cfg = resolve_llm_config(provider, env)
    if not cfg:
        return None
    name = cfg["provider"]
    return RemoteSpecProvider(
        name=name,
        model=cfg["model"],
        api_key=cfg["apiKey"],
        base_delay_sec=BASE_RETRY_DELAY_SEC[name],
        temperature=env_float("DSPY_TEMPERATURE", 0.7, env),
        max_tokens=env_int("DSPY_SPEC_MAX_TOKENS", 1024, env),
        timeout_sec=env_float("DSPY_LLM_TIMEOUT_SEC", 20.0, env),
        **kwargs,
    )


def select_provider(env: Optional[Mapping[str, str]] = None) -> SpecProvider:
    """Gemini if its key is set, else Anthropic, else the local template builder."""
    name = active_llm_provider(env)
    if name:
        remote = make_remote_provider(name, env)
        if remote is not None:
            return remote
    return LocalSpecProvider()


__all__ = ["MAX_ATTEMPTS", "RemoteSpecProvider", "error_status_code", "make_remote_provider", "select_provider"]
