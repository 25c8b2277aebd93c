"""
Vision pre-step: describe a reference image so the spec generator can treat it as ground truth.

Output is opaque text fed into `GeneratorInput.visual_analysis`. Failures never propagate; they
come back as an empty description plus an error string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import anyio
import dspy

from programs.vision_analysis.signature import DishImageAnalysis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisionAnalysisResult:
    description: str
    error: Optional[str] = None


def to_image_url(image: str) -> str:
    """Accept an http(s) URL, a data URL, or bare base64 (assumed JPEG, as the form uploads)."""
    t = str(image or "").strip()
    if t.startswith(("http://", "https://", "data:")):
        return t
    return f"data:image/jpeg;base64,{t}"


class VisionAnalyzer:
    def __init__(
        self,
        *,
        model: str,
        api_key: str,
        timeout_sec: float = 30.0,
        program: Optional[Callable[..., Any]] = None,
    ) -> None:
        self.model = model
        self._lm = dspy.LM(
            model=model, api_key=api_key, num_retries=0, cache=False, timeout=timeout_sec, max_tokens=1024
        )
        self._program = program or dspy.Predict(DishImageAnalysis)

    def _describe(self, image_url: str) -> str:
        with dspy.context(lm=self._lm):
            pred = self._program(image=dspy.Image(url=image_url))
        return str(getattr(pred, "description", None) or "").strip()

    async def analyze(self, image: str) -> VisionAnalysisResult:
        if not str(image or "").strip():
            return VisionAnalysisResult(description="", error="No image provided")
        try:
            description = await anyio.to_thread.run_sync(self._describe, to_image_url(image))
        except Exception as e:
            logger.warning("[Vision] analysis failed: %s: %s", type(e).__name__, e)
            return VisionAnalysisResult(description="", error=f"Vision API error: {type(e).__name__}")
        if not description:
            logger.warning("[Vision] empty description from %s", self.model)
            return VisionAnalysisResult(description="", error="Invalid response from Vision API")
        return VisionAnalysisResult(description=description)


__all__ = ["VisionAnalysisResult", "VisionAnalyzer", "to_image_url"]
