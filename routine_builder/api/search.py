from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from routine_builder.api.request_body import BadRequestBody, read_json_body
from routine_builder.api.schemas import ErrorSchema, SearchRequestSchema, SearchResponseSchema, SearchResultSchema
from routine_builder.application.exceptions import SearchNotConfiguredError, SearchUpstreamError
from routine_builder.core.config import Settings
from routine_builder.wiring.dependencies import build_proxy_search_use_case, get_request_settings

router = APIRouter()
logger = logging.getLogger(__name__)


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=ErrorSchema(error=message).model_dump())


async def _run_search(query: str, settings: Settings) -> JSONResponse:
    use_case = build_proxy_search_use_case(settings)
    try:
        results = await run_in_threadpool(use_case.execute, query)
    except SearchNotConfiguredError as e:
        return _error(400, str(e))
    except SearchUpstreamError as e:
        logger.error("Search backend failed", extra={"query": query, "reason": str(e)})
        return _error(502, str(e))

    body = SearchResponseSchema(results=[SearchResultSchema(**r.to_payload()) for r in results])
    return JSONResponse(content=body.model_dump(mode="json"))


@router.post("/search")
async def search(request: Request, settings: Settings = Depends(get_request_settings)) -> JSONResponse:
    try:
        try:
            payload = await read_json_body(request)
            req = SearchRequestSchema.model_validate(payload)
        except (BadRequestBody, ValidationError) as e:
            return _error(400, str(e))
        return await _run_search(req.text(), settings)
    except Exception as e:
        logger.exception("Fatal error in search handler", extra={"reason": str(e)})
        return _error(500, str(e) or type(e).__name__)


@router.get("/search")
async def search_get(q: str = Query(""), settings: Settings = Depends(get_request_settings)) -> JSONResponse:
    try:
        return await _run_search(q.strip(), settings)
    except Exception as e:
        logger.exception("Fatal error in search handler", extra={"reason": str(e)})
        return _error(500, str(e) or type(e).__name__)
