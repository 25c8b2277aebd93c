from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator


MarketingGoal = Literal["menu_hero", "promo_banner", "social_feed", "social_story", "delivery_listing"]
Mood = Literal["fresh", "indulgent", "cozy", "premium", "street"]
ShotType = Literal["top_down", "angle_45", "eye_level", "macro"]
Background = Literal["studio_seamless", "marble", "rustic_wood", "cafe_table", "banana_leaf", "street_stall"]
LightingStyle = Literal["softbox", "volumetric", "golden_hour", "rim_lighting", "natural_window", "dramatic_shadow"]
QualityBoost = Literal[
    "8k_resolution",
    "photorealistic",
    "commercial_grade",
    "85mm_lens",
    "bokeh_effect",
    "sharp_focus",
    "vibrant_colors",
]
AspectRatio = Literal["1:1", "4:5", "9:16", "16:9"]
TargetModel = Literal["midjourney", "sdxl", "dalle", "banana"]
DietaryFlag = Literal["halal", "vegan", "vegetarian", "gluten_free"]
Prop = Literal[
    "chopsticks",
    "fork_knife",
    "napkin",
    "herbs",
    "sauce_drizzle",
    "steam",
    "ice_cubes",
    "condensation",
    "lime_wedge",
    "chili_flakes",
    "sesame_seeds",
    "garnish_leaf",
]
QuickFix = Literal["brighter_lighting", "less_props", "more_premium", "closer_shot", "more_steam", "crisp_texture"]
VariantKind = Literal["safe_commercial", "premium_editorial", "punchy_social"]

VARIANT_KINDS: tuple[VariantKind, ...] = ("safe_commercial", "premium_editorial", "punchy_social")


class GeneratorInput(BaseModel):
    """Validated generator request. Enum fields outside the known sets are rejected here."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    dish_name: str = Field(..., alias="dishName", min_length=1)
    key_ingredients: Optional[str] = Field(default=None, alias="keyIngredients")
    cuisine_style: Optional[str] = Field(default=None, alias="cuisineStyle")
    dietary_flags: List[DietaryFlag] = Field(default_factory=list, alias="dietaryFlags")
    marketing_goal: MarketingGoal = Field(..., alias="marketingGoal")
    brand_vibe: Optional[str] = Field(default=None, alias="brandVibe")
    mood: Optional[Mood] = None
    shot_type: Optional[ShotType] = Field(default=None, alias="shotType")
    background: Optional[Background] = None
    lighting_style: Optional[LightingStyle] = Field(default=None, alias="lightingStyle")
    quality_boosts: List[QualityBoost] = Field(default_factory=list, alias="qualityBoosts")
    props: List[Prop] = Field(default_factory=list)
    aspect_ratio: AspectRatio = Field(default="1:1", alias="aspectRatio")
    target_model: TargetModel = Field(default="midjourney", alias="targetModel")
    strict_ingredients: bool = Field(default=False, alias="strictIngredients")
    leave_negative_space: bool = Field(default=False, alias="leaveNegativeSpace")
    enable_vision: bool = Field(default=False, alias="enableVision")
    quick_fixes: List[QuickFix] = Field(default_factory=list, alias="quickFixes")
    reference_image_url: Optional[str] = Field(default=None, alias="referenceImageUrl")
    reference_image: Optional[str] = Field(default=None, alias="referenceImage")
    visual_analysis: Optional[str] = Field(default=None, alias="visualAnalysis")

    @field_validator("dish_name")
    @classmethod
    def _dish_name_not_blank(cls, v: str) -> str:
        t = v.strip()
        if not t:
            raise ValueError("Dish name is required")
        return t

    @field_validator("dietary_flags", "quality_boosts", "props", "quick_fixes", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("reference_image_url", mode="before")
    @classmethod
    def _url_or_empty(cls, v: Any) -> Any:
        # "" is how the form sends "no reference URL".
        if v is None:
            return None
        t = str(v).strip()
        if not t:
            return None
        parsed = urlparse(t)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError("Must be a valid URL")
        return t

    @field_validator("reference_image", "visual_analysis", "brand_vibe", "key_ingredients", "cuisine_style", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class VariantCues(BaseModel):
    safe_commercial: str
    premium_editorial: str
    punchy_social: str


class PromptSpec(BaseModel):
    """
    Canonical intermediate representation shared by the spec builder, remote providers and renderers.

    Every non-optional field is required: remote JSON that drops a list is a schema failure,
    an empty list is not.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    subject: str
    ingredients: List[str]
    plating: str
    composition: str
    lighting: str
    camera: str
    background: str
    props: List[str]
    mood: str
    style: str
    constraints: List[str]
    negative: List[str]
    model_hints: Dict[str, str] = Field(..., alias="modelHints")
    variant_cues: Optional[VariantCues] = Field(default=None, alias="variantCues")
    reference_image_url: Optional[str] = Field(default=None, alias="referenceImageUrl")

    @field_validator("style", mode="before")
    @classmethod
    def _normalize_style(cls, v: Any) -> Any:
        # Hosted models sometimes return style keywords as a list.
        if isinstance(v, list) and all(isinstance(x, str) for x in v):
            return ", ".join(v)
        return v

    def cue_for(self, kind: VariantKind) -> str:
        if self.variant_cues is None:
            return ""
        return str(getattr(self.variant_cues, kind, "") or "")


class VariantPrompt(BaseModel):
    prompt: str
    type: VariantKind


class GeneratorOutputs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    variant_a: VariantPrompt = Field(..., alias="variantA")
    variant_b: VariantPrompt = Field(..., alias="variantB")
    variant_c: VariantPrompt = Field(..., alias="variantC")
    negative: str
    settings: Dict[str, str]

    def variants(self) -> List[VariantPrompt]:
        return [self.variant_a, self.variant_b, self.variant_c]


class GeneratorOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    spec: PromptSpec
    outputs: GeneratorOutputs


__all__ = [
    "AspectRatio",
    "Background",
    "DietaryFlag",
    "GeneratorInput",
    "GeneratorOutput",
    "GeneratorOutputs",
    "LightingStyle",
    "MarketingGoal",
    "Mood",
    "Prop",
    "PromptSpec",
    "QualityBoost",
    "QuickFix",
    "ShotType",
    "TargetModel",
    "VARIANT_KINDS",
    "VariantCues",
    "VariantKind",
    "VariantPrompt",
]
