from __future__ import annotations

import os
import sys
import time
import uuid
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR


def _repo_root() -> Path:
    # `api/main.py` lives at `<repo>/api/main.py`
    return Path(__file__).resolve().parents[1]


def _ensure_src_on_path() -> None:
    src = _repo_root() / "src"
    if not src.is_dir():
        return
    s = str(src)
    if s not in sys.path:
        sys.path.insert(0, s)


_ensure_src_on_path()

from api.cache import ResponseCache  # noqa: E402
from api.http_logging import install_http_logging  # noqa: E402
from api.rate_limit import MemoryTokenBucket  # noqa: E402
from api.routes.generate import router as generate_router  # noqa: E402
from api.routes.health import router as health_router  # noqa: E402
from providers.base import SpecProvider  # noqa: E402
from providers.config import env_int, resolve_llm_config, resolve_vision_model  # noqa: E402
from providers.llm import select_provider  # noqa: E402
from providers.vision import VisionAnalyzer  # noqa: E402


def _make_vision_analyzer(env: Mapping[str, str]) -> Optional[VisionAnalyzer]:
    # Vision runs on Gemini only; without its key the pre-step is skipped.
    cfg = resolve_llm_config("gemini", env)
    if not cfg:
        return None
    return VisionAnalyzer(model=resolve_vision_model(env), api_key=cfg["apiKey"])


def create_app(
    *,
    env: Optional[Mapping[str, str]] = None,
    spec_provider: Optional[SpecProvider] = None,
    rate_limiter: Optional[MemoryTokenBucket] = None,
    response_cache: Optional[ResponseCache] = None,
    vision_analyzer: Optional[VisionAnalyzer] = None,
) -> FastAPI:
    """
    Build the app and its process-wide collaborators (provider, limiter, cache, vision).

    Everything lives on `app.state`; tests inject their own instances.
    """
    if env is None:
        # Load `.env` + `.env.local` when present (local dev convenience).
        load_dotenv(_repo_root() / ".env", override=False)
        load_dotenv(_repo_root() / ".env.local", override=False)
        env = os.environ

    app = FastAPI(title="dish-prompt-service")
    app.state.spec_provider = spec_provider or select_provider(env)
    app.state.rate_limiter = rate_limiter or MemoryTokenBucket(
        max_tokens=env_int("DISH_PROMPT_RATE_LIMIT_MAX", 20, env),
        refill_rate=env_int("DISH_PROMPT_RATE_LIMIT_REFILL", 2, env),
        refill_interval_ms=1000,
        max_keys=env_int("DISH_PROMPT_RATE_LIMIT_KEYS", 10_000, env),
    )
    app.state.response_cache = response_cache or ResponseCache(capacity=env_int("DISH_PROMPT_CACHE_SIZE", 100, env))
    app.state.vision_analyzer = vision_analyzer if vision_analyzer is not None else _make_vision_analyzer(env)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        request_id = f"val_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"
        # Keep server logs useful without dumping full bodies.
        print(
            f"[api] 400 validation_error requestId={request_id} path={request.url.path} errors={exc.errors()}",
            flush=True,
        )
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={
                "ok": False,
                "error": "validation_error",
                "message": "Request body did not match expected schema.",
                "requestId": request_id,
            },
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = f"err_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"
        print(f"[api] 500 internal_error requestId={request_id} path={request.url.path} err={exc!r}", flush=True)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "ok": False,
                "error": "internal_error",
                "message": "Unhandled server error.",
                "requestId": request_id,
            },
        )

    app.include_router(health_router)
    app.include_router(generate_router, prefix="/v1/api")
    app.include_router(generate_router, prefix="/api")
    install_http_logging(app, env)
    return app


app = create_app()
