from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def permissive_cors(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Answer every preflight with 204 and stamp CORS headers on all other responses."""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
