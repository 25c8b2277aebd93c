from __future__ import annotations

import dspy

from programs.spec_generator.signature import DishPromptSpecJSON


class SpecGeneratorProgram(dspy.Module):
    """
    Thin DSPy wrapper for the hosted-model spec call.
    """

    def __init__(self) -> None:
        super().__init__()
        self.prog = dspy.Predict(DishPromptSpecJSON)

    def forward(self, *, dish_brief: str):  # type: ignore[override]
        return self.prog(dish_brief=dish_brief)


__all__ = ["SpecGeneratorProgram"]
