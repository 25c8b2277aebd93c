"""
Prompt text for the hosted-model spec generator.

`build_spec_generator_prompt()` becomes the DSPy signature instructions; `build_dish_brief()` renders
the per-request user data.
"""

from __future__ import annotations

from programs.prompt_engine.presets import DEFAULT_BACKGROUND, DEFAULT_CUISINE, DEFAULT_MOOD, DEFAULT_SHOT_TYPE
from schemas.prompt_spec import GeneratorInput


PERSONA = """You are a world-class Senior Food Photographer and Creative Director with 20 years of experience in high-end F&B marketing.
Your goal is to craft the image specification that sells the food, tells the brand story, and triggers appetite appeal."""

ANTI_SLOP_RULES = """COMBAT "AI SLOP" AND THE PLASTIC LOOK:
- Avoid perfection words ("perfect", "flawless", "pristine") unless the marketing goal strictly demands them.
- Emphasize texture with tactile words: porous, flaky, uneven, coarse, gooey, charred, bubbling.
- Imperfections sell realism: stray crumbs, slight sauce splatter, melting edges, steam mist, oil separation.
- Camera quality: film grain, shot on 35mm, 8k raw photo, ultra-realistic texture, depth of field.
"""

SOURCE_OF_TRUTH_RULES = """SOURCE OF TRUTH:
- When VISUAL ANALYSIS is present it is the source of truth for everything physically in the frame:
  crockery, portion size, piece counts, spatial layout, layering, colors and visible ingredients.
- User text is the source of truth for the dish name, marketing goal, brand vibe, aspect ratio,
  target model and every constraint (strict ingredients, negative space, dietary flags).
- If user ingredients and the visual analysis disagree, describe what the analysis sees and keep the
  user's constraints. If the dish name is missing or generic, name the dish from the analysis.
- Without VISUAL ANALYSIS, use only the user text. Do not invent ingredients when strict ingredients is true.
"""

VARIANT_RULES = """GENERATE 3 DISTINCT VARIANT CUES in `variantCues` (one short sentence each):
1. safe_commercial: high-key, evenly lit, clear product focus, studio lighting, sharp focus; clean but real, never plastic.
2. premium_editorial: raw and authentic; chiaroscuro, deep shadows, rich textures, film grain, imperfect plating, natural window light.
3. punchy_social: "phone eats first"; harsh flash, high contrast, vibrant, hard shadows, authentic messy vibe, up-close macro.
"""

SPEC_FIELDS = """The JSON object MUST contain every one of these fields (use [] for an empty list, never omit a field):
- subject (string): the main dish name, adjectives allowed
- ingredients (string[]): visible ingredients with their state (crispy, charred, ...)
- plating (string)
- composition (string)
- lighting (string): technical terms welcome (rim light, gobo, softbox)
- camera (string): angle and settings
- background (string)
- props (string[])
- mood (string)
- style (string)
- constraints (string[])
- negative (string[]): things to avoid
- modelHints (object): {"aspectRatio": "...", "targetModel": "..."}
- variantCues (object): {"safe_commercial": "...", "premium_editorial": "...", "punchy_social": "..."}
"""

HARD_RULES = """HARD RULES:
- Output MUST be a single JSON object only in `spec_json` (no prose, no markdown, no code fences).
- Copy aspectRatio and targetModel from the brief into modelHints exactly.
"""


def build_spec_generator_prompt() -> str:
    return "\n\n".join([PERSONA, ANTI_SLOP_RULES, SOURCE_OF_TRUTH_RULES, VARIANT_RULES, SPEC_FIELDS, HARD_RULES])


def _join(values: list[str], empty: str) -> str:
    return ", ".join(values) if values else empty


def build_dish_brief(inp: GeneratorInput) -> str:
    """Every resolved input field, defaults applied, one per line."""
    lines = [
        "Generate a PromptSpec for:",
        f"Dish: {inp.dish_name}",
        f"Key Ingredients: {inp.key_ingredients or 'not specified'}",
        f"Cuisine Style: {inp.cuisine_style or DEFAULT_CUISINE}",
        f"Dietary Flags: {_join(list(inp.dietary_flags), 'none')}",
        f"Marketing Goal: {inp.marketing_goal}",
        f"Brand Vibe: {inp.brand_vibe or 'professional'}",
        f"Mood: {inp.mood or DEFAULT_MOOD}",
        f"Shot Type: {inp.shot_type or DEFAULT_SHOT_TYPE}",
        f"Background: {inp.background or DEFAULT_BACKGROUND}",
        f"Lighting Style: {inp.lighting_style or 'not specified'}",
        f"Quality Boosts: {_join(list(inp.quality_boosts), 'none')}",
        f"Props: {_join(list(inp.props), 'minimal')}",
        f"Quick Fixes: {_join(list(inp.quick_fixes), 'none')}",
        f"Aspect Ratio: {inp.aspect_ratio}",
        f"Target Model: {inp.target_model}",
        f"Strict Ingredients: {str(inp.strict_ingredients).lower()}",
        f"Leave Negative Space: {str(inp.leave_negative_space).lower()}",
        f"Reference Image URL: {inp.reference_image_url or 'none'}",
    ]
    if inp.visual_analysis:
        lines.extend(["", "VISUAL ANALYSIS (source of truth for what is in the frame):", inp.visual_analysis.strip()])
    return "\n".join(lines)


__all__ = ["build_dish_brief", "build_spec_generator_prompt"]
