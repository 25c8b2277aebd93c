"""
Static phrase tables used by the spec builder, variant assembler and renderers.

Keys mirror the enum values in `schemas.prompt_spec`; the composition table is keyed by
the marketing-goal enum exactly.
"""

from __future__ import annotations

from typing import Dict, List


BRAND_VIBE_PRESETS: Dict[str, List[str]] = {
    "modern_minimalist": ["minimalist", "clean", "modern", "sophisticated", "white space"],
    "rustic_artisan": ["rustic", "artisan", "handcrafted", "natural", "warm"],
    "bold_vibrant": ["bold", "vibrant", "saturated", "energetic", "colorful"],
    "luxury_premium": ["luxury", "premium", "elegant", "sophisticated", "moody"],
    "casual_friendly": ["casual", "friendly", "approachable", "warm", "inviting"],
    "street_authentic": ["street", "authentic", "raw", "genuine", "documentary"],
    "health_wellness": ["healthy", "fresh", "natural", "bright", "organic"],
    "indulgent_comfort": ["indulgent", "comfort", "rich", "satisfying", "hearty"],
}

LIGHTING_PRESETS: Dict[str, List[str]] = {
    "fresh": [
        "bright natural daylight",
        "soft diffused window light",
        "airy backlight with gentle rim lighting",
    ],
    "indulgent": [
        "warm golden hour light",
        "dramatic side lighting with deep shadows",
        "soft spotlight with dark background",
    ],
    "cozy": [
        "warm ambient tungsten light",
        "soft candlelit atmosphere",
        "gentle morning light through curtains",
    ],
    "premium": [
        "controlled studio lighting with subtle gradients",
        "dramatic chiaroscuro with single key light",
        "elegant rim lighting on dark backdrop",
    ],
    "street": [
        "harsh midday sun with strong shadows",
        "neon street lights mixed with natural light",
        "overcast diffused outdoor light",
    ],
}

LIGHTING_MAGIC_KEYWORDS: Dict[str, str] = {
    "softbox": "professional softbox lighting with soft even illumination",
    "volumetric": "volumetric lighting with atmospheric haze and light rays",
    "golden_hour": "warm golden hour sunlight with long shadows",
    "rim_lighting": "dramatic rim lighting highlighting edges",
    "natural_window": "soft natural window light with gentle shadows",
    "dramatic_shadow": "dramatic chiaroscuro lighting with deep shadows",
}

QUALITY_KEYWORDS: Dict[str, str] = {
    "8k_resolution": "8k resolution, ultra high definition",
    "photorealistic": "photorealistic, lifelike quality",
    "commercial_grade": "commercial grade advertising photography",
    "85mm_lens": "shot on 85mm lens, professional portrait focal length",
    "bokeh_effect": "beautiful bokeh effect, creamy background blur",
    "sharp_focus": "sharp focus on the food, tack sharp details",
    "vibrant_colors": "vibrant colors, rich color palette",
}

COMPOSITION_RULES: Dict[str, str] = {
    "menu_hero": "centered hero composition, dish as clear focal point, clean edges",
    "promo_banner": "rule of thirds, negative space on left or right for text overlay",
    "social_feed": "centered or slightly off-center, strong visual impact, scroll-stopping",
    "social_story": "vertical composition, subject in center-lower third, space for text above",
    "delivery_listing": "top-down or 45-degree, portion clearly visible, clean background",
}

CAMERA_PRESETS: Dict[str, str] = {
    "top_down": "shot from directly above, flat lay perspective, 90-degree angle",
    "angle_45": "shot at 45-degree angle, classic food photography perspective, eye-catching diagonal",
    "eye_level": "shot at eye level, immersive perspective, looking straight at the dish",
    "macro": "extreme close-up macro shot, focus on textures and details, shallow depth of field",
}

BACKGROUND_PRESETS: Dict[str, str] = {
    "studio_seamless": "clean white seamless studio background",
    "marble": "elegant white marble surface with subtle veining",
    "rustic_wood": "warm rustic wooden table surface with natural grain",
    "cafe_table": "cafe table setting with ambient blur background",
    "banana_leaf": "fresh green banana leaf as natural plating surface",
    "street_stall": "authentic street food stall environment",
}

FOOD_REALISM_BOOSTERS: List[str] = [
    "realistic food texture",
    "appetizing presentation",
    "professional food photography",
    "sharp focus on food details",
    "natural color accuracy",
    "mouthwatering appearance",
    "crispy golden edges where applicable",
    "glistening sauce sheen",
    "visible steam rising",
    "condensation droplets on cold items",
    "caramelized surfaces",
    "fresh herb garnish details",
]

NEGATIVE_PROMPT_BASE: List[str] = [
    "artificial looking",
    "plastic food",
    "oversaturated",
    "blurry",
    "out of focus",
    "distorted",
    "unappetizing",
    "dirty plate",
    "messy background",
    "low quality",
    "amateur photography",
    "text",
    "watermark",
    "logo",
    "signature",
    "human hands visible",
    "fingers in frame",
    "deformed food",
    "melted incorrectly",
    "wrong proportions",
]

STRICT_NEGATIVE_EXTRAS: List[str] = ["extra garnishes", "additional ingredients"]

VARIANT_MODIFIERS: Dict[str, List[str]] = {
    "safe_commercial": [
        "clean commercial look",
        "professional advertising quality",
        "menu-ready",
        "broad appeal",
    ],
    "premium_editorial": [
        "editorial food photography",
        "magazine quality",
        "artistic composition",
        "sophisticated mood",
    ],
    "punchy_social": [
        "scroll-stopping",
        "vibrant and bold",
        "instagram-worthy",
        "trendy food styling",
    ],
}

SDXL_QUALITY_TAGS: List[str] = [
    "masterpiece",
    "best quality",
    "ultra detailed",
    "sharp focus",
    "professional food photography",
]

SDXL_NEGATIVE_TAGS: List[str] = [
    "low quality",
    "worst quality",
    "jpeg artifacts",
    "pixelated",
    "cropped",
    "username",
]

# Quick-fix phrases.
BRIGHTER_LIGHTING_PREFIX = "bright, well-lit "
CLOSER_SHOT_SUFFIX = ", tight crop, filling the frame"
PREMIUM_STYLE_SUFFIX = ", luxury high-end presentation, premium quality"
MORE_STEAM_PROP = "visible steam rising"
CRISP_TEXTURE_PROP = "crispy golden texture"
LESS_PROPS_LIMIT = 2

# Constraint clauses.
STRICT_INGREDIENTS_CLAUSE = "only show specified ingredients, no additional garnishes or extras"
NEGATIVE_SPACE_CLAUSE = "leave negative space for text overlay"
DIETARY_CLAUSES: Dict[str, str] = {
    "halal": "halal-certified presentation",
    "vegan": "plant-based, no animal products visible",
}

DEFAULT_MOOD = "fresh"
DEFAULT_SHOT_TYPE = "angle_45"
DEFAULT_BACKGROUND = "studio_seamless"
DEFAULT_CUISINE = "modern"

# modelHints value marking an uploaded (non-URL) reference image.
INLINE_REFERENCE_HINT = "inline"
