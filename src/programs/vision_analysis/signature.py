from __future__ import annotations

import dspy


VISION_PROMPT = """Analyze this food/product image and provide a detailed visual description for a photography prompt.

Focus on REALISM and AUTHENTICITY:
- Textures: uneven browning, oil glisten, crumbs, condensation, sauce drips, rough surfaces.
- Lighting: natural shadows, reflections, light fall-off.
- "Perfectly imperfect" details: charred edges, steam mist, scattered herbs, organic arrangement.
- Core elements: main subject color palette and material properties.
- CROCKERY & PLATING: the exact plate/bowl type (e.g. "stainless steel shallow bowl with wide rim").
- QUANTITY & DISTRIBUTION: count visible pieces (e.g. "approx 5 slices of beef"), exact rice/sauce color.
- SPATIAL LAYOUT: the position of every element (e.g. "fried egg at 11 o'clock").
- LAYERING: what sits on top of what.

The goal is a forensic reconstruction of the scene: a generated image must be able to match this layout exactly.
Output plain text only (no JSON, no markdown)."""


class DishImageAnalysis(dspy.Signature):
    image: dspy.Image = dspy.InputField(desc="Reference photo of the dish.")
    description: str = dspy.OutputField(desc="Plain-text visual description of the dish, crockery and layout.")


DishImageAnalysis.__doc__ = VISION_PROMPT

__all__ = ["DishImageAnalysis", "VISION_PROMPT"]
