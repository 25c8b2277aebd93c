"""
Sectioned prompt block for the Flux-based "banana" model.

The camera line is always derived from the user-selected shot type in `modelHints.shotType`,
never from `spec.camera`, which a hosted model may have rewritten. The CORE MANDATE section
appears for a reference URL or for an uploaded image (`modelHints.referenceImage`).
"""

from __future__ import annotations

from typing import List

from programs.prompt_engine.presets import CAMERA_PRESETS, DEFAULT_SHOT_TYPE, INLINE_REFERENCE_HINT, VARIANT_MODIFIERS
from programs.renderers.text import collapse_whitespace, join_nonempty
from schemas.prompt_spec import PromptSpec

QUALITY_TRIGGER = "ultra realistic, 8k, photorealistic masterpiece"
OVERHEAD_BACKGROUND = "background surface in even, sharp focus across the frame, no depth-of-field falloff"
ANGLED_BACKGROUND = "background softly blurred with shallow depth of field and creamy bokeh, dish in crisp focus"


def _is_overhead(shot_type: str) -> bool:
    s = shot_type.lower()
    return "top" in s or "overhead" in s or "flat_lay" in s


def _style_direction(assembled: str, spec: PromptSpec) -> str:
    for kind, modifiers in VARIANT_MODIFIERS.items():
        if ", ".join(modifiers) in assembled:
            return join_nonempty([", ".join(modifiers), spec.cue_for(kind)])  # type: ignore[arg-type]
    return ""


def _sentence(text: str) -> str:
    t = text.strip().rstrip(".")
    return f"{t}." if t else ""


def render_banana(assembled: str, spec: PromptSpec) -> str:
    shot_type = spec.model_hints.get("shotType") or DEFAULT_SHOT_TYPE
    camera = CAMERA_PRESETS.get(shot_type) or CAMERA_PRESETS[DEFAULT_SHOT_TYPE]
    aspect_ratio = spec.model_hints.get("aspectRatio") or "1:1"

    sections: List[str] = []
    if spec.reference_image_url:
        source = f"the reference image ({spec.reference_image_url})"
    elif spec.model_hints.get("referenceImage") == INLINE_REFERENCE_HINT:
        source = "the attached reference image"
    else:
        source = ""
    if source:
        sections.append(
            f"CORE MANDATE: Recreate the dish from {source}. "
            "Maintain the exact composition, crockery, portioning and plating of the reference image."
        )

    subject = spec.subject
    if spec.ingredients:
        subject += f", featuring {', '.join(spec.ingredients)}"
    sections.append(f"SUBJECT: {_sentence(subject)} {_sentence(spec.plating)}".rstrip())

    setting = [
        _sentence(spec.composition),
        _sentence(spec.background),
        _sentence(OVERHEAD_BACKGROUND if _is_overhead(shot_type) else ANGLED_BACKGROUND),
    ]
    if spec.props:
        setting.append(_sentence(f"Props: {', '.join(spec.props)}"))
    if spec.constraints:
        setting.append(_sentence("; ".join(spec.constraints)))
    sections.append("SETTING & COMPOSITION: " + join_nonempty(setting, " "))

    sections.append("LIGHTING: " + join_nonempty([_sentence(spec.lighting), _sentence(spec.mood)], " "))

    technical = [
        _sentence(camera),
        _sentence(spec.style),
        _sentence(_style_direction(assembled, spec)),
        _sentence(f"Aspect ratio {aspect_ratio}"),
        _sentence(QUALITY_TRIGGER),
    ]
    sections.append("TECHNICAL SPECS: " + join_nonempty(technical, " "))

    return "\n\n".join(collapse_whitespace(s) for s in sections)
