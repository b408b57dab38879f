"""Gemini completion gateway for the AI chef.

Two operations, each on the model suited to its weight:

1. send_message() - conversational reply on the light chat model, returns raw text
2. generate_recipe() - structured recipe on the heavy model, returns parsed JSON
   or ``{"rawText": ...}`` when the output is not the expected JSON object

Model guide:
- CHAT_MODEL (default gemini-3-flash-preview): fast conversation, best cost/latency
- RECIPE_MODEL (default gemini-3-pro-preview): complex recipe generation, creative reasoning

A missing GEMINI_API_KEY fails before any client is built. Provider failures
are wrapped in CompletionError with an operation-specific prefix and are not
retried. The sync google-genai client runs in a worker thread via
asyncio.to_thread.
"""

import asyncio
import json
import re
from dataclasses import dataclass
from typing import Any, Optional

from google import genai
from google.genai import types

from chefmate.models.models import ChatContext, ChefConfig, RecipeParameters
from chefmate.prompts.prompts import (
    generate_chat_greeting,
    generate_chat_prompt,
    generate_chef_system_prompt,
    generate_recipe_prompt,
)
from chefmate.utils.config import config
from chefmate.utils.logger import logger


MISSING_API_KEY_MESSAGE = "GEMINI_API_KEY environment variable is required"
CHAT_FAILURE_PREFIX = "AI response generation failed: "
RECIPE_FAILURE_PREFIX = "Recipe generation failed: "

HARM_CATEGORIES = (
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
)

_FENCED_JSON = re.compile(r"```json\n?([\s\S]*?)\n?```")


class ConfigurationError(ValueError):
    """Raised when the provider credential is missing."""


class CompletionError(RuntimeError):
    """Raised when a call to the model provider fails."""


def get_safety_settings() -> list[types.SafetySetting]:
    """Block harassment, hate speech, sexual and dangerous content at the configured threshold."""
    threshold = types.HarmBlockThreshold(config.SAFETY_THRESHOLD)
    return [types.SafetySetting(category=category, threshold=threshold) for category in HARM_CATEGORIES]


def get_client() -> genai.Client:
    """Build a Gemini client.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is not set. Nothing is sent in that case.
    """
    if not config.GEMINI_API_KEY:
        raise ConfigurationError(MISSING_API_KEY_MESSAGE)
    return genai.Client(api_key=config.GEMINI_API_KEY)


@dataclass
class GeminiModel:
    """A client bound to one model id and the shared safety settings."""

    client: genai.Client
    model: str

    @property
    def generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(safety_settings=get_safety_settings())

    async def generate(self, prompt: str) -> str:
        """Send a single prompt and return the response text.

        Raises:
            ValueError: If the model returned no text (e.g. blocked by safety filters).
        """
        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.model,
            contents=prompt,
            config=self.generation_config,
        )
        if response.text is None:
            raise ValueError("Model returned an empty response")
        return response.text


def get_gemini_flash() -> GeminiModel:
    """Light model for conversational replies."""
    return GeminiModel(client=get_client(), model=config.CHAT_MODEL)


def get_gemini_pro() -> GeminiModel:
    """Heavy model for recipe generation."""
    return GeminiModel(client=get_client(), model=config.RECIPE_MODEL)


def create_chat_session(chef_config: ChefConfig):
    """Open a multi-turn chat primed with the persona.

    The history starts with the system prompt as a user turn and the chef's
    greeting as the model turn, so the first real message already gets an
    in-character answer.

    Returns:
        google-genai Chat object; call ``send_message(text)`` on it.
    """
    model = get_gemini_flash()
    system_prompt = generate_chef_system_prompt(chef_config)

    return model.client.chats.create(
        model=model.model,
        config=model.generation_config,
        history=[
            types.Content(role="user", parts=[types.Part(text=f"시스템 설정: {system_prompt}")]),
            types.Content(role="model", parts=[types.Part(text=generate_chat_greeting(chef_config))]),
        ],
    )


async def send_message(
    message: str,
    chef_config: ChefConfig,
    context: Optional[ChatContext] = None,
) -> str:
    """Get an in-character reply to a single user message.

    Args:
        message: User message.
        chef_config: Persona to answer as.
        context: Optional ingredients/tools the user has on hand.

    Returns:
        Raw response text.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is missing.
        CompletionError: If the provider call fails.
    """
    model = get_gemini_flash()
    prompt = generate_chat_prompt(message, chef_config, context)

    logger.debug(f"Chat prompt for '{chef_config.name}': {len(prompt)} chars")
    try:
        return await model.generate(prompt)
    except Exception as e:
        raise CompletionError(f"{CHAT_FAILURE_PREFIX}{e}") from e


def parse_recipe_response(text: str) -> dict[str, Any]:
    """Parse a recipe out of the model output.

    Tries, in order:
    1. The body of a fenced ```json block, when one is present
    2. The whole text as JSON, when there is no fenced block

    Returns:
        The parsed JSON object, or ``{"rawText": text}`` if parsing fails or
        the result is not a JSON object.
    """
    match = _FENCED_JSON.search(text)
    candidate = match.group(1) if match else text
    source = "fenced block" if match else "full text"

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.warning(f"Recipe JSON parse failed ({source}): {e}. Returning raw text.")
        return {"rawText": text}

    if not isinstance(parsed, dict):
        logger.warning(f"Recipe JSON ({source}) is {type(parsed).__name__}, not an object. Returning raw text.")
        return {"rawText": text}

    return parsed


async def generate_recipe(request: RecipeParameters, chef_config: ChefConfig) -> dict[str, Any]:
    """Generate a recipe from the user's ingredients, tools and preferences.

    Args:
        request: Ingredients, tools and preferences.
        chef_config: Persona writing the recipe.

    Returns:
        Parsed recipe dict, or ``{"rawText": ...}`` when the output is not JSON.
        Unparsable output is a valid result, not an error.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is missing.
        CompletionError: If the provider call fails.
    """
    model = get_gemini_pro()
    prompt = generate_recipe_prompt(request, chef_config)

    logger.debug(f"Recipe prompt for '{chef_config.name}': {len(request.ingredients)} ingredient(s)")
    try:
        text = await model.generate(prompt)
    except Exception as e:
        raise CompletionError(f"{RECIPE_FAILURE_PREFIX}{e}") from e

    return parse_recipe_response(text)
