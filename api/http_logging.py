"""
Opt-in request/response logging for the generator API.

One JSON line per HTTP request on the `api.http` logger. Bodies are parsed in full, redacted,
and only then capped at `max_body_bytes` of serialized text, so an inline reference image never
reaches the log even when the request is larger than the cap.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from providers.config import env_bool, env_int

logger = logging.getLogger("api.http")

_SECRET_HEADERS = {"authorization", "cookie", "set-cookie", "x-api-key", "x-goog-api-key"}

# Payload fields logged as a length marker only (base64 images, long vision descriptions).
_BULKY_FIELDS = {"referenceImage", "visualAnalysis"}


def redact_body(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: f"<{len(v)} chars>" if k in _BULKY_FIELDS and isinstance(v, str) else redact_body(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [redact_body(v) for v in value]
    return value


def summarize_body(raw: bytes, max_bytes: int) -> Any:
    """Redacted JSON body, or a preview of its redacted serialization when over `max_bytes`."""
    if not raw or max_bytes <= 0:
        return None
    try:
        parsed = json.loads(raw)
    except ValueError:
        return f"<{len(raw)} bytes, not JSON>"
    redacted = redact_body(parsed)
    text = json.dumps(redacted, ensure_ascii=False, separators=(",", ":"))
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return redacted
    return {
        "truncated": True,
        "bytes": len(raw),
        "preview": encoded[:max_bytes].decode("utf-8", errors="ignore"),
    }


def _header_map(raw: Optional[Iterable[Tuple[bytes, bytes]]]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for k, v in raw or []:
        name = k.decode("latin-1").lower()
        out[name] = "***" if name in _SECRET_HEADERS else v.decode("latin-1")
    return out


class HttpLoggingMiddleware:
    def __init__(self, app: ASGIApp, *, log_headers: bool, max_body_bytes: int) -> None:
        self.app = app
        self.log_headers = log_headers
        self.max_body_bytes = max(0, max_body_bytes)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        started_at = time.perf_counter()
        req_headers = _header_map(scope.get("headers"))
        req_chunks: List[bytes] = []
        res_chunks: List[bytes] = []
        res_status: Optional[int] = None
        res_headers: Dict[str, str] = {}

        async def receive_logged() -> Message:
            message = await receive()
            if message.get("type") == "http.request":
                req_chunks.append(message.get("body") or b"")
            return message

        async def send_logged(message: Message) -> None:
            nonlocal res_status, res_headers
            if message.get("type") == "http.response.start":
                res_status = int(message.get("status") or 0)
                res_headers = _header_map(message.get("headers"))
            elif message.get("type") == "http.response.body":
                res_chunks.append(message.get("body") or b"")
            await send(message)

        error: Optional[Exception] = None
        try:
            await self.app(scope, receive_logged, send_logged)
        except Exception as e:
            error = e
            raise
        finally:
            record: Dict[str, Any] = {
                "id": req_headers.get("x-request-id") or uuid.uuid4().hex[:12],
                "method": str(scope.get("method") or "").upper(),
                "path": str(scope.get("path") or ""),
                "status": res_status,
                "dur_ms": int((time.perf_counter() - started_at) * 1000),
                "request": {"body": summarize_body(b"".join(req_chunks), self.max_body_bytes)},
                "response": {"body": summarize_body(b"".join(res_chunks), self.max_body_bytes)},
            }
            if self.log_headers:
                record["request"]["headers"] = req_headers
                record["response"]["headers"] = res_headers
            if error is not None:
                record["error"] = {"type": type(error).__name__, "message": str(error)}
            logger.info(json.dumps(record, ensure_ascii=False, separators=(",", ":"), default=str))


def install_http_logging(app: Any, env: Optional[Mapping[str, str]] = None) -> None:
    """
    Enable request/response logging via env vars.

    - `DISH_PROMPT_HTTP_LOG=1` enables the middleware
    - `DISH_PROMPT_HTTP_LOG_HEADERS=1` adds request/response headers (secrets masked)
    - `DISH_PROMPT_HTTP_LOG_BODY_MAX_BYTES=4096` caps the logged body text per request/response
    """
    if not env_bool("DISH_PROMPT_HTTP_LOG", default=False, env=env):
        return
    app.add_middleware(
        HttpLoggingMiddleware,
        log_headers=env_bool("DISH_PROMPT_HTTP_LOG_HEADERS", default=False, env=env),
        max_body_bytes=env_int("DISH_PROMPT_HTTP_LOG_BODY_MAX_BYTES", 4096, env),
    )
