"""
Serverless entrypoint: platforms that look for `api/index.py` import `app` from here.
"""

from __future__ import annotations

from api.main import app

__all__ = ["app"]
