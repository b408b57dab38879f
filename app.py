"""AI Chef API Service.

Single entry point for the HTTP service:
- POST /api/chat: in-character reply from the selected chef persona
- POST /api/recipe: structured recipe from ingredients, tools and preferences
- GET /api/health: liveness check

Run with: python app.py
"""

import uvicorn

from chefmate.api.app import create_app
from chefmate.utils.config import config
from chefmate.utils.logger import logger


app = create_app()


if __name__ == "__main__":
    logger.info(f"Starting AI Chef service on port {config.PORT}")
    logger.info(f"Chat model: {config.CHAT_MODEL} | Recipe model: {config.RECIPE_MODEL}")
    if not config.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set - every completion request will fail with 500")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
