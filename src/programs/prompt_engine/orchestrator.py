"""
Prompt generation orchestration (Provider -> Variant Assembler -> Renderer).

`generate_output` is the async entry point used by the API; `generate_prompts` is the
synchronous template-only path (no provider, no I/O).
"""

from __future__ import annotations

from programs.prompt_engine.settings import resolve_settings
from programs.prompt_engine.spec_builder import build_spec
from programs.prompt_engine.variants import render_variant
from programs.renderers import render_negative
from providers.base import SpecProvider
from schemas.prompt_spec import GeneratorInput, GeneratorOutput, GeneratorOutputs, PromptSpec, VariantPrompt


def build_output(inp: GeneratorInput, spec: PromptSpec) -> GeneratorOutput:
    target = inp.target_model
    outputs = GeneratorOutputs(
        variant_a=VariantPrompt(prompt=render_variant(spec, "safe_commercial", target), type="safe_commercial"),
        variant_b=VariantPrompt(prompt=render_variant(spec, "premium_editorial", target), type="premium_editorial"),
        variant_c=VariantPrompt(prompt=render_variant(spec, "punchy_social", target), type="punchy_social"),
        negative=render_negative(spec, target),
        settings=resolve_settings(target, inp.aspect_ratio),
    )
    return GeneratorOutput(spec=spec, outputs=outputs)


def generate_prompts(inp: GeneratorInput) -> GeneratorOutput:
    return build_output(inp, build_spec(inp))


async def generate_output(inp: GeneratorInput, provider: SpecProvider) -> GeneratorOutput:
    spec = await provider.generate_spec(inp)
    return build_output(inp, spec)


__all__ = ["build_output", "generate_output", "generate_prompts"]
