"""FastAPI application factory for the AI chef service."""

from fastapi import FastAPI

from chefmate.api.routes import router
from chefmate.utils.logger import logger


def create_app() -> FastAPI:
    """Create the application with the chat, recipe and health routes mounted."""
    app = FastAPI(
        title="AI Chef",
        description="Persona-driven cooking assistant: chat and recipe generation on Gemini",
    )
    app.include_router(router)
    logger.info("✓ Routes registered: POST /api/chat, POST /api/recipe, GET /api/health")
    return app
