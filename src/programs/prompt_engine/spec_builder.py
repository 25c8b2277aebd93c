"""
Deterministic PromptSpec builder.

Maps a validated `GeneratorInput` onto preset phrases. No I/O and no randomness, so identical
input always yields an identical spec (the response cache relies on this).
"""

from __future__ import annotations

from typing import Dict, List, Optional

from programs.prompt_engine import presets
from schemas.prompt_spec import GeneratorInput, PromptSpec


def split_ingredients(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def brand_keywords(brand_vibe: Optional[str]) -> List[str]:
    if not brand_vibe:
        return []
    return list(presets.BRAND_VIBE_PRESETS.get(brand_vibe) or [brand_vibe])


def brighten(lighting: str) -> str:
    if lighting.startswith(presets.BRIGHTER_LIGHTING_PREFIX):
        return lighting
    return presets.BRIGHTER_LIGHTING_PREFIX + lighting


def tighten(camera: str) -> str:
    if camera.endswith(presets.CLOSER_SHOT_SUFFIX):
        return camera
    return camera + presets.CLOSER_SHOT_SUFFIX


def request_model_hints(inp: GeneratorInput) -> Dict[str, str]:
    """Hints owned by the request; hosted-model output never overrides these."""
    hints: Dict[str, str] = {
        "aspectRatio": inp.aspect_ratio,
        "targetModel": inp.target_model,
        "shotType": inp.shot_type or presets.DEFAULT_SHOT_TYPE,
    }
    if inp.reference_image and not inp.reference_image_url:
        hints["referenceImage"] = presets.INLINE_REFERENCE_HINT
    return hints


def _mood_phrase(mood: str, keywords: List[str]) -> str:
    if not keywords:
        return f"{mood} atmosphere"
    return f"{mood} atmosphere, {', '.join(keywords)}"


def _style_phrase(*, premium: bool, quality_boosts: List[str]) -> str:
    extra = presets.PREMIUM_STYLE_SUFFIX if premium else ""
    style = f"professional food photography{extra}, {', '.join(presets.FOOD_REALISM_BOOSTERS[:5])}"
    # Table order, so duplicates and selection order never change the output.
    for boost, phrase in presets.QUALITY_KEYWORDS.items():
        if boost in quality_boosts:
            style += f", {phrase}"
    return style


def _constraints(inp: GeneratorInput) -> List[str]:
    out: List[str] = []
    if inp.strict_ingredients:
        out.append(presets.STRICT_INGREDIENTS_CLAUSE)
    if inp.leave_negative_space:
        out.append(presets.NEGATIVE_SPACE_CLAUSE)
    for flag, clause in presets.DIETARY_CLAUSES.items():
        if flag in inp.dietary_flags:
            out.append(clause)
    return out


def _negative(inp: GeneratorInput) -> List[str]:
    out = list(presets.NEGATIVE_PROMPT_BASE)
    if inp.strict_ingredients:
        out.extend(presets.STRICT_NEGATIVE_EXTRAS)
    return out


def build_spec(inp: GeneratorInput) -> PromptSpec:
    """
    Build the canonical spec for one request.

    Quick fixes apply in a fixed order: more_steam, crisp_texture, brighter_lighting (then the
    lighting-style keywords), less_props, more_premium, closer_shot. The lighting prefix and
    camera suffix are only added when not already present, so re-applying fixes to an adjusted
    phrase does not stack qualifiers.
    """
    mood = inp.mood or presets.DEFAULT_MOOD
    shot_type = inp.shot_type or presets.DEFAULT_SHOT_TYPE
    background = inp.background or presets.DEFAULT_BACKGROUND
    fixes = set(inp.quick_fixes)

    keywords = brand_keywords(inp.brand_vibe)
    lighting = (presets.LIGHTING_PRESETS.get(mood) or presets.LIGHTING_PRESETS[presets.DEFAULT_MOOD])[0]
    # Marketing goal is a validated enum; a missing key is a caller bug, not a default.
    composition = presets.COMPOSITION_RULES[inp.marketing_goal]
    camera = presets.CAMERA_PRESETS[shot_type]

    props = [p.replace("_", " ") for p in inp.props]
    if "more_steam" in fixes:
        props.append(presets.MORE_STEAM_PROP)
    if "crisp_texture" in fixes:
        props.append(presets.CRISP_TEXTURE_PROP)

    if "brighter_lighting" in fixes:
        lighting = brighten(lighting)
    if inp.lighting_style:
        lighting = f"{lighting}, {presets.LIGHTING_MAGIC_KEYWORDS[inp.lighting_style]}"

    if "less_props" in fixes:
        props = props[: presets.LESS_PROPS_LIMIT]

    style = _style_phrase(premium="more_premium" in fixes, quality_boosts=list(inp.quality_boosts))

    if "closer_shot" in fixes:
        camera = tighten(camera)

    return PromptSpec(
        subject=inp.dish_name,
        ingredients=split_ingredients(inp.key_ingredients),
        plating=f"appetizing {inp.cuisine_style or presets.DEFAULT_CUISINE} plating style",
        composition=composition,
        lighting=lighting,
        camera=camera,
        background=presets.BACKGROUND_PRESETS[background],
        props=props,
        mood=_mood_phrase(mood, keywords),
        style=style,
        constraints=_constraints(inp),
        negative=_negative(inp),
        model_hints=request_model_hints(inp),
        reference_image_url=inp.reference_image_url,
    )


__all__ = ["brand_keywords", "brighten", "build_spec", "request_model_hints", "split_ingredients", "tighten"]
