from __future__ import annotations

import time
from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request) -> Dict[str, Any]:
    provider = getattr(request.app.state, "spec_provider", None)
    return {
        "ok": True,
        "service": "dish-prompt-service",
        "mode": getattr(provider, "name", "mock"),
        "ts": int(time.time() * 1000),
    }
