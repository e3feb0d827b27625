from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from routine_builder.api.request_body import BadRequestBody, read_json_body
from routine_builder.api.schemas import ChatRequestSchema, ChatResponseSchema, ErrorSchema, SearchResultSchema
from routine_builder.application.exceptions import ConfigurationError, LLMContractError, LLMUpstreamError
from routine_builder.core.config import Settings
from routine_builder.wiring.dependencies import build_proxy_chat_use_case, get_request_settings

router = APIRouter()
logger = logging.getLogger(__name__)


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=ErrorSchema(error=message).model_dump())


@router.post("/chat")
@router.post("/", include_in_schema=False)
async def chat(request: Request, settings: Settings = Depends(get_request_settings)) -> JSONResponse:
    try:
        try:
            payload = await read_json_body(request)
            req = ChatRequestSchema.model_validate(payload)
        except (BadRequestBody, ValidationError) as e:
            return _error(400, str(e))

        use_case = build_proxy_chat_use_case(settings)
        messages = [m.model_dump() for m in req.messages] if req.messages else None

        try:
            result = await run_in_threadpool(use_case.execute, req.message, messages)
        except ValueError as e:
            return _error(400, str(e))
        except ConfigurationError as e:
            logger.error("Chat proxy misconfigured", extra={"reason": str(e)})
            return _error(500, str(e))
        except (LLMUpstreamError, LLMContractError) as e:
            logger.error("Language model call failed", extra={"reason": str(e)})
            return _error(502, str(e))

        body = ChatResponseSchema(
            reply=result.reply,
            web_results=[SearchResultSchema(**r.to_payload()) for r in result.web_results],
            openai=result.raw,
        )
        return JSONResponse(content=body.model_dump(mode="json"))
    except Exception as e:
        logger.exception("Fatal error in chat handler", extra={"reason": str(e)})
        return _error(500, str(e) or type(e).__name__)
