from __future__ import annotations

from programs.renderers.text import collapse_whitespace
from schemas.prompt_spec import PromptSpec


def render_midjourney(assembled: str, spec: PromptSpec) -> str:
    aspect_ratio = spec.model_hints.get("aspectRatio") or "1:1"
    params = [
        f"--ar {aspect_ratio}",
        "--stylize 750",
        "--quality 2",
        "--v 6",
    ]

    url = spec.reference_image_url
    prefix = ""
    if url:
        # Style reference plus max image weight to keep the reference's subject structure.
        params.extend([f"--sref {url}", "--sw 100", "--iw 2"])
        prefix = f"{url} "

    return f"{prefix}{collapse_whitespace(assembled)} {' '.join(params)}"
