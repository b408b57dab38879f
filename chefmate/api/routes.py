"""HTTP endpoints for chat and recipe generation.

Handlers read the raw JSON body and validate it against the request models so
that every malformed request maps to a 400 with the issue list, instead of
FastAPI's default 422. Everything else raised past validation is turned into a
500 here; nothing escapes the handler.
"""

import json
import uuid
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from chefmate.models.models import ChatRequest, RecipeRequest
from chefmate.services.gemini import generate_recipe, send_message
from chefmate.utils.logger import logger


INVALID_REQUEST_MESSAGE = "잘못된 요청입니다."
CHAT_FAILURE_MESSAGE = "AI 응답 생성 중 오류가 발생했습니다."
RECIPE_FAILURE_MESSAGE = "레시피 생성 중 오류가 발생했습니다."

router = APIRouter(prefix="/api", tags=["chef"])


class InvalidBody(Exception):
    """Request body could not be validated."""

    def __init__(self, issues: list[dict[str, Any]]) -> None:
        super().__init__(f"{len(issues)} validation issue(s)")
        self.issues = issues


async def _parse_body(request: Request, model: type[BaseModel]) -> Any:
    """Decode and validate the JSON body.

    Raises:
        InvalidBody: With pydantic-style issues for bad JSON or schema violations.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidBody([{"type": "json_invalid", "loc": ["body"], "msg": f"Invalid JSON: {e}"}]) from e

    try:
        return model.model_validate(body, by_alias=True, by_name=False)
    except ValidationError as e:
        raise InvalidBody(e.errors(include_url=False, include_context=False)) from e


def _invalid_response(e: InvalidBody) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": INVALID_REQUEST_MESSAGE, "details": e.issues})


@router.post("/chat")
async def chat(request: Request) -> JSONResponse:
    """Reply to a chat message as the requested persona.

    Returns:
        200 ``{"response": str}``, 400 ``{"error", "details"}`` or 500 ``{"error"}``.
    """
    request_id = uuid.uuid4().hex[:8]
    log_extra = {"request_id": request_id, "endpoint": "chat"}

    try:
        payload: ChatRequest = await _parse_body(request, ChatRequest)
    except InvalidBody as e:
        logger.warning(f"Chat request rejected: {e}", extra=log_extra)
        return _invalid_response(e)

    logger.info(f"Chat request for chef '{payload.chef_config.name}'", extra=log_extra)
    try:
        response = await send_message(payload.message, payload.chef_config, payload.context)
    except Exception as e:
        logger.error(f"Chat API error: {e}", exc_info=True, extra=log_extra)
        return JSONResponse(status_code=500, content={"error": CHAT_FAILURE_MESSAGE})

    return JSONResponse(content={"response": response})


@router.post("/recipe")
async def recipe(request: Request) -> JSONResponse:
    """Generate a recipe from ingredients, tools and preferences.

    Returns:
        200 ``{"recipe": dict}`` (structured, or ``{"rawText": str}``),
        400 ``{"error", "details"}`` or 500 ``{"error"}``.
    """
    request_id = uuid.uuid4().hex[:8]
    log_extra = {"request_id": request_id, "endpoint": "recipe"}

    try:
        payload: RecipeRequest = await _parse_body(request, RecipeRequest)
    except InvalidBody as e:
        logger.warning(f"Recipe request rejected: {e}", extra=log_extra)
        return _invalid_response(e)

    logger.info(
        f"Recipe request for chef '{payload.chef_config.name}' with {len(payload.ingredients)} ingredient(s)",
        extra=log_extra,
    )
    try:
        result = await generate_recipe(payload, payload.chef_config)
    except Exception as e:
        logger.error(f"Recipe API error: {e}", exc_info=True, extra=log_extra)
        return JSONResponse(status_code=500, content={"error": RECIPE_FAILURE_MESSAGE})

    return JSONResponse(content={"recipe": result})


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
