from __future__ import annotations

import dspy

from programs.spec_generator.prompts import build_spec_generator_prompt


class DishPromptSpecJSON(dspy.Signature):
    """
    Spec generator signature.

    Prompt text lives in `programs.spec_generator.prompts`.
    """

    dish_brief: str = dspy.InputField(desc="Resolved request fields, one `Label: value` per line, plus optional visual analysis.")

    spec_json: str = dspy.OutputField(
        desc="JSON ONLY (no markdown). A PromptSpec object with every field present, including variantCues."
    )


__all__ = ["DishPromptSpecJSON"]

DishPromptSpecJSON.__doc__ = build_spec_generator_prompt()
