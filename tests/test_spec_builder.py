from programs.prompt_engine import presets
from programs.prompt_engine.spec_builder import brighten, build_spec, split_ingredients, tighten
from schemas.prompt_spec import GeneratorInput


def _inp(**kwargs) -> GeneratorInput:
    payload = {"dishName": "Wagyu Beef Burger", "marketingGoal": "menu_hero"}
    payload.update(kwargs)
    return GeneratorInput.model_validate(payload)


def test_build_spec_wagyu_scenario():
    spec = build_spec(
        _inp(keyIngredients="wagyu patty, cheddar cheese", aspectRatio="1:1", targetModel="midjourney")
    )
    assert spec.subject == "Wagyu Beef Burger"
    assert spec.ingredients == ["wagyu patty", "cheddar cheese"]
    assert "centered" in spec.composition
    assert spec.model_hints == {"aspectRatio": "1:1", "targetModel": "midjourney", "shotType": "angle_45"}


def test_build_spec_is_deterministic():
    inp = _inp(keyIngredients="a, b", brandVibe="rustic_artisan", props=["herbs", "napkin"], quickFixes=["more_steam"])
    assert build_spec(inp) == build_spec(inp)


def test_build_spec_defaults():
    spec = build_spec(_inp())
    assert spec.ingredients == []
    assert spec.lighting == presets.LIGHTING_PRESETS["fresh"][0]
    assert spec.camera == presets.CAMERA_PRESETS["angle_45"]
    assert spec.background == presets.BACKGROUND_PRESETS["studio_seamless"]
    assert spec.plating == "appetizing modern plating style"
    assert spec.mood == "fresh atmosphere"
    assert spec.constraints == []
    assert spec.negative == presets.NEGATIVE_PROMPT_BASE


def test_split_ingredients_drops_empty_entries():
    assert split_ingredients(" a , ,b,, ") == ["a", "b"]
    assert split_ingredients(None) == []


def test_brand_vibe_preset_and_custom_keywords():
    spec = build_spec(_inp(brandVibe="bold_vibrant", mood="street"))
    assert spec.mood == "street atmosphere, bold, vibrant, saturated, energetic, colorful"

    spec = build_spec(_inp(brandVibe="hand-painted signage"))
    assert spec.mood == "fresh atmosphere, hand-painted signage"


def test_strict_ingredients_adds_constraint_and_negatives():
    spec = build_spec(_inp(strictIngredients=True))
    assert presets.STRICT_INGREDIENTS_CLAUSE in spec.constraints
    assert spec.constraints[0].startswith("only show specified ingredients")
    assert "extra garnishes" in spec.negative
    assert "additional ingredients" in spec.negative


def test_negative_space_and_dietary_constraints():
    spec = build_spec(_inp(leaveNegativeSpace=True, dietaryFlags=["vegan", "halal", "gluten_free"]))
    assert spec.constraints == [
        "leave negative space for text overlay",
        presets.DIETARY_CLAUSES["halal"],
        presets.DIETARY_CLAUSES["vegan"],
    ]


def test_props_are_humanized():
    spec = build_spec(_inp(props=["sauce_drizzle", "lime_wedge"]))
    assert spec.props == ["sauce drizzle", "lime wedge"]


def test_quick_fix_more_steam_and_crisp_texture():
    spec = build_spec(_inp(quickFixes=["crisp_texture", "more_steam"]))
    assert spec.props == [presets.MORE_STEAM_PROP, presets.CRISP_TEXTURE_PROP]


def test_quick_fix_less_props_truncates_after_additions():
    spec = build_spec(_inp(props=["herbs", "napkin", "chopsticks"], quickFixes=["more_steam", "less_props"]))
    assert spec.props == ["herbs", "napkin"]


def test_quick_fix_brighter_lighting_prefix():
    spec = build_spec(_inp(mood="premium", quickFixes=["brighter_lighting"]))
    assert spec.lighting == "bright, well-lit " + presets.LIGHTING_PRESETS["premium"][0]


def test_lighting_style_appends_after_brightening():
    spec = build_spec(_inp(lightingStyle="rim_lighting", quickFixes=["brighter_lighting"]))
    assert spec.lighting.startswith("bright, well-lit ")
    assert spec.lighting.endswith(presets.LIGHTING_MAGIC_KEYWORDS["rim_lighting"])


def test_quick_fix_more_premium_and_closer_shot():
    spec = build_spec(_inp(shotType="macro", quickFixes=["more_premium", "closer_shot"]))
    assert "luxury high-end presentation" in spec.style
    assert spec.camera == presets.CAMERA_PRESETS["macro"] + ", tight crop, filling the frame"


def test_brighten_and_tighten_do_not_stack():
    once = brighten("soft light")
    assert brighten(once) == once
    tight = tighten("eye level")
    assert tighten(tight) == tight


def test_quality_boosts_follow_table_order():
    a = build_spec(_inp(qualityBoosts=["vibrant_colors", "8k_resolution"]))
    b = build_spec(_inp(qualityBoosts=["8k_resolution", "vibrant_colors", "8k_resolution"]))
    assert a.style == b.style
    assert a.style.index("8k resolution") < a.style.index("vibrant colors")


def test_reference_url_is_carried_onto_spec():
    spec = build_spec(_inp(referenceImageUrl="https://cdn.example.com/burger.jpg"))
    assert spec.reference_image_url == "https://cdn.example.com/burger.jpg"


def test_inline_reference_image_is_hinted_only_without_url():
    spec = build_spec(_inp(referenceImage="aGVsbG8="))
    assert spec.model_hints["referenceImage"] == presets.INLINE_REFERENCE_HINT

    spec = build_spec(_inp(referenceImage="aGVsbG8=", referenceImageUrl="https://cdn.example.com/burger.jpg"))
    assert "referenceImage" not in spec.model_hints
