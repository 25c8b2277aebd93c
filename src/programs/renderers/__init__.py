"""
Target-model renderers.

Each renderer is a pure `(assembled, spec) -> str` function. Dispatch is keyed by the target
model id; unknown ids render as Midjourney.
"""

from __future__ import annotations

from typing import Callable, Dict

from programs.renderers.banana import render_banana
from programs.renderers.dalle import render_dalle
from programs.renderers.midjourney import render_midjourney
from programs.renderers.sdxl import render_sdxl, sdxl_negative
from schemas.prompt_spec import PromptSpec

Renderer = Callable[[str, PromptSpec], str]

RENDERERS: Dict[str, Renderer] = {
    "midjourney": render_midjourney,
    "sdxl": render_sdxl,
    "dalle": render_dalle,
    "banana": render_banana,
}


def get_renderer(target_model: str) -> Renderer:
    return RENDERERS.get(str(target_model or "").strip().lower(), render_midjourney)


def render_negative(spec: PromptSpec, target_model: str) -> str:
    if str(target_model or "").strip().lower() == "sdxl":
        return sdxl_negative(spec)
    return ", ".join(spec.negative)


__all__ = [
    "RENDERERS",
    "Renderer",
    "get_renderer",
    "render_banana",
    "render_dalle",
    "render_midjourney",
    "render_negative",
    "render_sdxl",
    "sdxl_negative",
]
