"""Recipe builder store.

Collects ingredients, tools and preferences, then calls ``POST /api/recipe``
with the selected persona and keeps the returned recipe.
"""

from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from chefmate.models.models import RecipePreferences
from chefmate.presets.presets import resolve_preset_config
from chefmate.stores.base import ApiStore
from chefmate.utils.config import config
from chefmate.utils.logger import logger


MISSING_INGREDIENTS_MESSAGE = "재료를 최소 1개 이상 입력해주세요."
INVALID_PREFERENCES_MESSAGE = "선호 설정 값이 올바르지 않습니다."


class RecipeState(BaseModel):
    ingredients: List[str] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)
    preferences: RecipePreferences = Field(default_factory=RecipePreferences)
    selected_preset_id: str = Field(default_factory=lambda: config.DEFAULT_PRESET_ID)
    # Structured recipe dict, or {"rawText": ...} when the model output was not JSON
    recipe: Optional[dict[str, Any]] = None
    is_loading: bool = False
    error: Optional[str] = None


def _preference_alias(key: str) -> str:
    field = RecipePreferences.model_fields.get(key)
    return field.alias if field is not None and field.alias else key


def _append_unique(items: List[str], value: str) -> List[str]:
    trimmed = value.strip()
    if not trimmed or trimmed in items:
        return items
    return [*items, trimmed]


class RecipeStore(ApiStore[RecipeState]):
    """Recipe request form plus the last generated recipe."""

    def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        super().__init__(RecipeState(), base_url=base_url, transport=transport)

    def add_ingredient(self, ingredient: str) -> None:
        """Add a trimmed ingredient. Blank input and duplicates are ignored."""
        self.set_state(ingredients=_append_unique(self.state.ingredients, ingredient))

    def remove_ingredient(self, ingredient: str) -> None:
        self.set_state(ingredients=[i for i in self.state.ingredients if i != ingredient])

    def add_tool(self, tool: str) -> None:
        """Add a trimmed tool. Blank input and duplicates are ignored."""
        self.set_state(tools=_append_unique(self.state.tools, tool))

    def remove_tool(self, tool: str) -> None:
        self.set_state(tools=[t for t in self.state.tools if t != tool])

    def set_preferences(self, **preferences: Any) -> None:
        """Shallow-merge preference fields and validate the result.

        Keys may be attribute names (``cooking_time``) or wire names
        (``cookingTime``). Invalid values leave the preferences unchanged and
        set ``error``.
        """
        merged = {
            **self.state.preferences.model_dump(by_alias=True, exclude_unset=True),
            **{_preference_alias(key): value for key, value in preferences.items()},
        }
        try:
            validated = RecipePreferences.model_validate(merged)
        except ValidationError as e:
            logger.warning(f"Rejected recipe preferences {preferences}: {e}")
            self.set_state(error=INVALID_PREFERENCES_MESSAGE)
            return

        self.set_state(preferences=validated)

    def set_preset(self, preset_id: str) -> None:
        self.set_state(selected_preset_id=preset_id)

    async def generate_recipe(self) -> None:
        """Request a recipe for the current form.

        Without ingredients, sets an error and sends nothing.
        """
        state = self.state

        if not state.ingredients:
            self.set_state(error=MISSING_INGREDIENTS_MESSAGE)
            return

        self.set_state(is_loading=True, error=None)

        try:
            data = await self._post_json(
                "/api/recipe",
                {
                    "ingredients": state.ingredients,
                    "tools": state.tools,
                    "preferences": state.preferences.model_dump(mode="json", by_alias=True, exclude_none=True),
                    "chefConfig": resolve_preset_config(state.selected_preset_id).model_dump(
                        mode="json", by_alias=True, exclude_none=True
                    ),
                },
            )
            recipe = data.get("recipe")
            if recipe is not None and not isinstance(recipe, dict):
                raise ValueError(f"Unexpected recipe payload: {type(recipe).__name__}")
        except Exception as e:
            logger.warning(f"Recipe request failed: {e}")
            self.set_state(is_loading=False, error=self._error_message(e))
            return

        self.set_state(recipe=recipe, is_loading=False)

    def reset(self) -> None:
        """Restore every field to its initial value, including the recipe and selected persona."""
        initial = RecipeState()
        self.set_state(**{name: getattr(initial, name) for name in RecipeState.model_fields})
