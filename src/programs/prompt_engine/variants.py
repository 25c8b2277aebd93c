from __future__ import annotations

from programs.prompt_engine.presets import VARIANT_MODIFIERS
from programs.renderers import get_renderer
from programs.renderers.text import join_nonempty
from schemas.prompt_spec import PromptSpec, VariantKind


def assemble_variant(spec: PromptSpec, kind: VariantKind) -> str:
    """
    Pre-render description for one variant.

    The variant's modifiers (and its styling cue, when a hosted model supplied one) are layered on
    top of the spec; the spec itself is never modified.
    """
    segments = [
        spec.subject,
        f"with {', '.join(spec.ingredients)}" if spec.ingredients else "",
        spec.plating,
        spec.lighting,
        spec.camera,
        spec.background,
        f"props: {', '.join(spec.props)}" if spec.props else "",
        spec.mood,
        spec.style,
        ", ".join(VARIANT_MODIFIERS[kind]),
        spec.cue_for(kind),
        ", ".join(spec.constraints) if spec.constraints else "",
    ]
    return join_nonempty(segments)


def render_variant(spec: PromptSpec, kind: VariantKind, target_model: str) -> str:
    return get_renderer(target_model)(assemble_variant(spec, kind), spec)


__all__ = ["assemble_variant", "render_variant"]
