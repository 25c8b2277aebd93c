from __future__ import annotations

import re

_WS_RE = re.compile(r"\s+")
_REPEATED_PERIOD_RE = re.compile(r"\.\s*\.")


def collapse_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text or "").strip()


def collapse_periods(text: str) -> str:
    """Collapse `. .` / `..` runs into a single period (repeats until stable)."""
    out = text
    while True:
        nxt = _REPEATED_PERIOD_RE.sub(".", out)
        if nxt == out:
            return out
        out = nxt


def join_nonempty(parts: list[str], sep: str = ", ") -> str:
    return sep.join(p for p in parts if p)
