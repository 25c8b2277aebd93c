from __future__ import annotations

from typing import Protocol

from programs.prompt_engine.spec_builder import build_spec
from schemas.prompt_spec import GeneratorInput, PromptSpec


class SpecProvider(Protocol):
    """Anything that can turn a validated request into a PromptSpec. Implementations must never raise."""

    name: str

    async def generate_spec(self, inp: GeneratorInput) -> PromptSpec: ...


class LocalSpecProvider:
    """Template mode: the deterministic spec builder, no I/O."""

    name = "mock"

    async def generate_spec(self, inp: GeneratorInput) -> PromptSpec:
        return build_spec(inp)


async def generate_spec(inp: GeneratorInput, provider: SpecProvider) -> PromptSpec:
    return await provider.generate_spec(inp)


__all__ = ["LocalSpecProvider", "SpecProvider", "generate_spec"]
