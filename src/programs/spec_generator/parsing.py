from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

_FENCED_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


def _safe_json_loads(text: str) -> Any:
    try:
        return json.loads(text)
    except Exception:
        return None


def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """
    Return the first JSON object in a model response, or None.

    Accepts bare JSON, JSON inside a ```json fence, or JSON surrounded by prose.
    """
    if not text:
        return None
    t = str(text).strip()
    m = _FENCED_RE.search(t)
    if m:
        t = m.group(1).strip()

    parsed = _safe_json_loads(t)
    if isinstance(parsed, dict):
        return parsed

    decoder = json.JSONDecoder()
    for start in (i for i, ch in enumerate(t) if ch == "{"):
        try:
            obj, _ = decoder.raw_decode(t, start)
        except ValueError:
            continue
        if isinstance(obj, dict):
            return obj
    return None


__all__ = ["extract_json_object"]
