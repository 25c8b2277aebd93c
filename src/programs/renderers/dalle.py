from __future__ import annotations

from programs.renderers.text import collapse_periods, collapse_whitespace
from schemas.prompt_spec import PromptSpec


def render_dalle(assembled: str, spec: PromptSpec) -> str:
    """
    DALL-E 3 reads prose better than keyword lists, so the pre-assembled string is ignored and a
    paragraph is composed from the spec fields directly.
    """
    ingredients = f"The dish features {', '.join(spec.ingredients)}." if spec.ingredients else ""
    props = f"Styled with {', '.join(spec.props)}." if spec.props else ""
    constraints = ". ".join(spec.constraints) + "." if spec.constraints else ""

    paragraph = (
        f"A professional food photograph of {spec.subject}. {ingredients} "
        f"{spec.lighting}. {spec.camera}. {spec.background}. {props} "
        f"{spec.mood}. {spec.style}. {constraints}"
    )
    return collapse_periods(collapse_whitespace(paragraph)).strip()
