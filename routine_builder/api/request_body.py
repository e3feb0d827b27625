from __future__ import annotations

import json
from typing import Any

from fastapi import Request


class BadRequestBody(ValueError):
    pass


async def read_json_body(request: Request) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type.lower():
        raise BadRequestBody("Request body must be JSON (Content-Type: application/json).")

    body = await request.body()
    try:
        payload = json.loads(body.decode("utf-8")) if body else {}
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BadRequestBody(f"Invalid JSON body: {e}") from e

    if not isinstance(payload, dict):
        raise BadRequestBody("JSON body must be an object.")
    return payload
