from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_429_TOO_MANY_REQUESTS

from api.cache import hash_input
from programs.prompt_engine.orchestrator import generate_output
from schemas.prompt_spec import GeneratorInput

logger = logging.getLogger("api.generate")

router = APIRouter(tags=["generate"])


def client_key(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip() or "anonymous"
    return "anonymous"


@router.post("/generate")
async def generate(request: Request, request_body: Dict[str, Any] = Body(...)) -> Response:
    """
    Dish brief -> PromptSpec -> 3 rendered variants + negative prompt + model settings.

    Rate limiting happens before validation; the cache is keyed on the validated input.
    """
    state = request.app.state
    rate = state.rate_limiter.consume(client_key(request))
    rate_headers = {"X-RateLimit-Remaining": str(rate.remaining), "X-RateLimit-Reset": str(rate.reset_at)}
    if not rate.allowed:
        return JSONResponse(
            {"ok": False, "error": "rate_limited", "message": "Rate limit exceeded", "resetAt": rate.reset_at},
            status_code=HTTP_429_TOO_MANY_REQUESTS,
            headers=rate_headers,
        )

    try:
        inp = GeneratorInput.model_validate(request_body)
    except ValidationError as e:
        request_id = f"val_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"
        return JSONResponse(
            {
                "ok": False,
                "error": "validation_error",
                "message": "Invalid input",
                "requestId": request_id,
                "details": e.errors(include_url=False, include_context=False),
            },
            status_code=HTTP_400_BAD_REQUEST,
        )

    cache_key = hash_input(inp.model_dump(mode="json", by_alias=True))
    cached = state.response_cache.get(cache_key)
    if cached is not None:
        return JSONResponse(cached, headers={"X-Cache": "HIT", "X-RateLimit-Remaining": str(rate.remaining)})

    vision = getattr(state, "vision_analyzer", None)
    image = inp.reference_image or inp.reference_image_url
    if inp.enable_vision and image and not inp.visual_analysis and vision is not None:
        analysis = await vision.analyze(image)
        if analysis.description:
            inp = inp.model_copy(update={"visual_analysis": analysis.description})

    provider = state.spec_provider
    output = await generate_output(inp, provider)
    body = output.model_dump(mode="json", by_alias=True, exclude_none=True)
    state.response_cache.set(cache_key, body)
    logger.info("generate mode=%s target=%s cache=MISS", provider.name, inp.target_model)

    return JSONResponse(
        body,
        headers={"X-Cache": "MISS", "X-Mode": provider.name, "X-RateLimit-Remaining": str(rate.remaining)},
    )
