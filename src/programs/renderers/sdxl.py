from __future__ import annotations

from programs.prompt_engine.presets import SDXL_NEGATIVE_TAGS, SDXL_QUALITY_TAGS
from programs.renderers.text import collapse_whitespace, join_nonempty
from schemas.prompt_spec import PromptSpec


def render_sdxl(assembled: str, spec: PromptSpec) -> str:
    return collapse_whitespace(f"{', '.join(SDXL_QUALITY_TAGS)}, {assembled}")


def sdxl_negative(spec: PromptSpec) -> str:
    """Base negatives followed by SDXL-specific artifact tags."""
    return join_nonempty([", ".join(spec.negative), ", ".join(SDXL_NEGATIVE_TAGS)])
