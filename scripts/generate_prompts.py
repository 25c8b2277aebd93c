#!/usr/bin/env python3
"""
Render the three variant prompts for a dish brief from the command line.

Usage:
    python scripts/generate_prompts.py brief.json
    echo '{"dishName": "Pho", "marketingGoal": "social_feed"}' | python scripts/generate_prompts.py -
    python scripts/generate_prompts.py brief.json --remote --variant b

Exit codes:
    0 - Prompts printed
    2 - Input is not a valid dish brief
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _ensure_import_paths() -> None:
    root = _repo_root()
    src = root / "src"
    for p in (root, src):
        s = str(p)
        if s not in sys.path:
            sys.path.insert(0, s)


def _read_brief(source: str) -> Dict[str, Any]:
    raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("brief must be a JSON object")
    return data


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate food-photography prompts for a dish brief.")
    parser.add_argument("brief", help="Path to a JSON dish brief, or '-' for stdin.")
    parser.add_argument("--remote", action="store_true", help="Use the env-selected hosted provider (Gemini/Anthropic).")
    parser.add_argument("--variant", choices=["a", "b", "c"], help="Print only this variant's rendered prompt.")
    args = parser.parse_args()

    _ensure_import_paths()
    from dotenv import load_dotenv
    from pydantic import ValidationError

    from programs.prompt_engine.orchestrator import generate_output
    from providers.base import LocalSpecProvider
    from providers.llm import select_provider
    from schemas.prompt_spec import GeneratorInput

    try:
        inp = GeneratorInput.model_validate(_read_brief(args.brief))
    except (OSError, ValueError, ValidationError) as e:
        print(f"invalid brief: {e}", file=sys.stderr)
        return 2

    if args.remote:
        load_dotenv(_repo_root() / ".env", override=False)
        provider = select_provider()
    else:
        provider = LocalSpecProvider()
    output = asyncio.run(generate_output(inp, provider))

    if args.variant:
        print(getattr(output.outputs, f"variant_{args.variant}").prompt)
    else:
        print(json.dumps(output.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
