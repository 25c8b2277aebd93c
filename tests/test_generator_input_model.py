import pytest

from schemas.prompt_spec import GeneratorInput, PromptSpec


def test_generator_input_accepts_camel_case_and_applies_defaults():
    inp = GeneratorInput.model_validate({"dishName": "  Nasi Lemak  ", "marketingGoal": "social_feed"})
    assert inp.dish_name == "Nasi Lemak"
    assert inp.aspect_ratio == "1:1"
    assert inp.target_model == "midjourney"
    assert inp.props == []
    assert inp.quick_fixes == []
    assert inp.strict_ingredients is False


def test_generator_input_rejects_blank_dish_name():
    with pytest.raises(Exception):
        GeneratorInput.model_validate({"dishName": "   ", "marketingGoal": "menu_hero"})


def test_generator_input_rejects_unknown_enum_values():
    with pytest.raises(Exception):
        GeneratorInput.model_validate({"dishName": "Pho", "marketingGoal": "billboard"})
    with pytest.raises(Exception):
        GeneratorInput.model_validate({"dishName": "Pho", "marketingGoal": "menu_hero", "aspectRatio": "3:2"})
    with pytest.raises(Exception):
        GeneratorInput.model_validate({"dishName": "Pho", "marketingGoal": "menu_hero", "props": ["spoon"]})


def test_generator_input_treats_empty_reference_url_as_missing():
    inp = GeneratorInput.model_validate({"dishName": "Pho", "marketingGoal": "menu_hero", "referenceImageUrl": ""})
    assert inp.reference_image_url is None


def test_generator_input_rejects_non_http_reference_url():
    with pytest.raises(Exception):
        GeneratorInput.model_validate({"dishName": "Pho", "marketingGoal": "menu_hero", "referenceImageUrl": "not a url"})
    with pytest.raises(Exception):
        GeneratorInput.model_validate(
            {"dishName": "Pho", "marketingGoal": "menu_hero", "referenceImageUrl": "ftp://example.com/a.jpg"}
        )


def test_generator_input_null_lists_become_empty():
    inp = GeneratorInput.model_validate(
        {"dishName": "Pho", "marketingGoal": "menu_hero", "props": None, "dietaryFlags": None, "quickFixes": None}
    )
    assert inp.props == [] and inp.dietary_flags == [] and inp.quick_fixes == []


def _spec_payload(**overrides):
    payload = {
        "subject": "Pho",
        "ingredients": ["rice noodles"],
        "plating": "bowl",
        "composition": "centered",
        "lighting": "soft",
        "camera": "45-degree",
        "background": "wood",
        "props": [],
        "mood": "cozy",
        "style": "editorial",
        "constraints": [],
        "negative": ["blurry"],
        "modelHints": {"aspectRatio": "1:1", "targetModel": "midjourney"},
    }
    payload.update(overrides)
    return payload


def test_prompt_spec_joins_list_style():
    spec = PromptSpec.model_validate(_spec_payload(style=["film grain", "35mm"]))
    assert spec.style == "film grain, 35mm"


def test_prompt_spec_requires_every_list_field():
    payload = _spec_payload()
    del payload["props"]
    with pytest.raises(Exception):
        PromptSpec.model_validate(payload)


def test_prompt_spec_variant_cues_are_optional():
    spec = PromptSpec.model_validate(_spec_payload())
    assert spec.cue_for("punchy_social") == ""

    spec = PromptSpec.model_validate(
        _spec_payload(
            variantCues={"safe_commercial": "a", "premium_editorial": "b", "punchy_social": "harsh flash"},
        )
    )
    assert spec.cue_for("punchy_social") == "harsh flash"
