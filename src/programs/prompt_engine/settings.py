from __future__ import annotations

from typing import Dict

SDXL_RESOLUTIONS: Dict[str, str] = {
    "1:1": "1024x1024",
    "4:5": "896x1120",
    "9:16": "768x1344",
    "16:9": "1344x768",
}

DALLE_SIZES: Dict[str, str] = {
    "1:1": "1024x1024",
    "16:9": "1792x1024",
}


def resolve_settings(target_model: str, aspect_ratio: str) -> Dict[str, str]:
    """Recommended generation parameters for the target model; unknown models get the Midjourney table."""
    ar = str(aspect_ratio or "1:1")
    tables: Dict[str, Dict[str, str]] = {
        "midjourney": {
            "Aspect Ratio": f"--ar {ar}",
            "Stylize": "--stylize 750",
            "Quality": "--quality 2",
            "Version": "--v 6",
            "Note": "Add --no text artifacts, watermark for cleaner output",
        },
        "sdxl": {
            "CFG Scale": "7-7.5",
            "Steps": "28-35",
            "Sampler": "DPM++ 2M Karras",
            "Clip Skip": "2",
            "Resolution": SDXL_RESOLUTIONS.get(ar, "1344x768"),
            "Note": "Use food photography LoRA if available",
        },
        "dalle": {
            "Quality": "HD",
            "Style": "Natural",
            # Every non-square, non-landscape ratio maps to the portrait size.
            "Size": DALLE_SIZES.get(ar, "1024x1792"),
            "Note": "DALL-E 3 generates natural-looking food well",
        },
        "banana": {
            "Aspect Ratio": ar,
            "Guidance": "3.5",
            "Steps": "28",
            "Note": "Paste the full sectioned block; do not add parameter flags",
        },
    }
    return dict(tables.get(str(target_model or "").strip().lower()) or tables["midjourney"])


__all__ = ["DALLE_SIZES", "SDXL_RESOLUTIONS", "resolve_settings"]
