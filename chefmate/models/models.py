"""Data models and schemas for the AI chef service.

Defines Pydantic models for request validation, persona configuration and
generated recipes. Attributes are snake_case in Python and camelCase on the
wire (``chefConfig``, ``speakingStyle``, ``cookingTime``...). Dump with
``model_dump(mode="json", by_alias=True, exclude_none=True)`` to build a request body.
"""

from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


ChefPersonality = Literal["professional", "friendly", "motherly", "coach", "scientific", "custom"]
Formality = Literal["formal", "casual"]
EmojiUsage = Literal["high", "medium", "low", "none"]
Technicality = Literal["expert", "general", "beginner"]
Difficulty = Literal["easy", "medium", "hard"]


class WireModel(BaseModel):
    """Base model with camelCase wire aliases.

    Python code may construct instances by attribute name. Request bodies are
    validated by alias only (see ``chefmate.api.routes``).
    """

    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True, validate_by_alias=True)


# ============================================================================
# Persona configuration
# ============================================================================


class SpeakingStyle(WireModel):
    """How the chef talks: register, emoji density and vocabulary level."""

    model_config = ConfigDict(frozen=True)

    formality: Formality
    emoji_usage: EmojiUsage
    technicality: Technicality


class ChefConfig(WireModel):
    """Persona configuration sent with every chat and recipe request.

    The full configuration travels with each call; the server keeps no persona state.
    ``custom_personality`` is only read when ``personality`` is ``"custom"``.
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(min_length=1, description="Display name of the chef")]
    personality: ChefPersonality
    custom_personality: Optional[str] = None
    expertise: Annotated[Tuple[str, ...], Field(min_length=1, description="Cuisines the chef specializes in")]
    cooking_philosophy: Optional[str] = None
    speaking_style: SpeakingStyle


class ChefPreset(WireModel):
    """Catalog entry letting a user pick a persona by id."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    emoji: str
    config: ChefConfig


# ============================================================================
# HTTP request bodies
# ============================================================================


class ChatContext(WireModel):
    """Kitchen inventory merged into a chat prompt."""

    ingredients: Optional[List[str]] = None
    tools: Optional[List[str]] = None


class ChatRequest(WireModel):
    """Body of ``POST /api/chat``."""

    message: Annotated[str, Field(min_length=1, description="User message (non-empty)")]
    chef_config: ChefConfig
    context: Optional[ChatContext] = None


class RecipePreferences(WireModel):
    """Optional constraints for recipe generation. ``cooking_time`` is in minutes."""

    cuisine: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    cooking_time: Optional[Union[int, float]] = None
    servings: Optional[Union[int, float]] = None


class RecipeParameters(WireModel):
    """What the user has and wants: the persona-independent part of a recipe request."""

    ingredients: Annotated[List[str], Field(min_length=1, description="Available ingredients (at least one)")]
    tools: List[str] = Field(default_factory=list)
    preferences: RecipePreferences = Field(default_factory=RecipePreferences)


class RecipeRequest(RecipeParameters):
    """Body of ``POST /api/recipe``."""

    chef_config: ChefConfig


# ============================================================================
# Transcript and results
# ============================================================================


class ChatMessage(WireModel):
    """One transcript entry. ``timestamp`` is epoch milliseconds."""

    id: str
    role: Literal["user", "assistant"]
    content: str
    timestamp: int


class RecipeIngredient(WireModel):
    model_config = ConfigDict(extra="allow")

    name: str
    quantity: Optional[Union[str, int, float]] = None
    unit: Optional[str] = None


class RecipeInstruction(WireModel):
    model_config = ConfigDict(extra="allow")

    step: int
    title: str
    description: str
    time: Optional[Union[int, float]] = None
    tips: Optional[str] = None


class NutritionInfo(WireModel):
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None


class GeneratedRecipe(WireModel):
    """Structured recipe as requested from the model.

    The gateway returns the parsed JSON untouched; this model is used where a
    typed view is needed (rendering). Unknown keys such as ``cuisine`` or
    ``tools`` are kept.
    """

    model_config = ConfigDict(extra="allow")

    title: str
    description: str = ""
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    instructions: List[RecipeInstruction] = Field(default_factory=list)
    nutrition: Optional[NutritionInfo] = None
    chef_note: Optional[str] = None
