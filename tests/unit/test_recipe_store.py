"""Unit tests for the recipe builder store."""

import json

import httpx
import pytest

from chefmate.presets.presets import find_preset_by_id
from chefmate.stores.recipe_store import INVALID_PREFERENCES_MESSAGE, MISSING_INGREDIENTS_MESSAGE, RecipeStore


MOCK_RECIPE = {
    "title": "양파볶음",
    "description": "간단한 양파볶음",
    "ingredients": [{"name": "양파", "quantity": "2", "unit": "개"}],
    "instructions": [{"step": 1, "title": "준비", "description": "양파를 썬다"}],
    "nutrition": {"calories": 100, "protein": 5, "carbs": 15, "fat": 3},
    "chefNote": "맛있게 드세요!",
}


def make_store(handler) -> RecipeStore:
    return RecipeStore(base_url="http://testserver", transport=httpx.MockTransport(handler))


class TestIngredientsAndTools:
    def test_initial_state(self):
        state = RecipeStore().state

        assert state.ingredients == []
        assert state.tools == []
        assert state.recipe is None
        assert state.is_loading is False
        assert state.error is None

    def test_add_ingredient_preserves_order(self):
        store = RecipeStore()
        store.add_ingredient("양파")
        store.add_ingredient("당근")
        assert store.state.ingredients == ["양파", "당근"]

    def test_add_ingredient_ignores_duplicates(self):
        store = RecipeStore()
        store.add_ingredient("onion")
        store.add_ingredient("onion")
        assert store.state.ingredients == ["onion"]

    def test_add_ingredient_trims_and_ignores_blank(self):
        store = RecipeStore()
        store.add_ingredient("  ")
        store.add_ingredient("  양파 ")
        store.add_ingredient("양파")
        assert store.state.ingredients == ["양파"]

    def test_remove_ingredient(self):
        store = RecipeStore()
        store.add_ingredient("양파")
        store.add_ingredient("당근")

        store.remove_ingredient("양파")

        assert store.state.ingredients == ["당근"]

    def test_add_and_remove_tool(self):
        store = RecipeStore()
        store.add_tool("프라이팬")
        store.add_tool("냄비")
        store.add_tool("냄비")
        assert store.state.tools == ["프라이팬", "냄비"]

        store.remove_tool("프라이팬")
        assert store.state.tools == ["냄비"]

    def test_set_preferences_merges(self):
        store = RecipeStore()
        store.set_preferences(cuisine="한식", cooking_time=30)
        store.set_preferences(cooking_time=20, servings=2)

        preferences = store.state.preferences
        assert preferences.cuisine == "한식"
        assert preferences.cooking_time == 20
        assert preferences.servings == 2

    def test_set_preferences_accepts_wire_names(self):
        store = RecipeStore()
        store.set_preferences(cooking_time=30)
        store.set_preferences(cookingTime=20, servings=2)

        assert store.state.preferences.cooking_time == 20
        assert store.state.preferences.servings == 2
        assert store.state.error is None

    def test_set_preferences_rejects_invalid_value(self):
        store = RecipeStore()
        store.set_preferences(cuisine="한식")

        store.set_preferences(difficulty="extreme", cooking_time=10)

        preferences = store.state.preferences
        assert store.state.error == INVALID_PREFERENCES_MESSAGE
        assert preferences.difficulty is None
        assert preferences.cooking_time is None
        assert preferences.cuisine == "한식"


class TestGenerateRecipe:
    @pytest.mark.asyncio
    async def test_no_ingredients_sets_error_without_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"recipe": MOCK_RECIPE})

        store = make_store(handler)

        await store.generate_recipe()

        assert store.state.error == MISSING_INGREDIENTS_MESSAGE
        assert calls == []
        assert store.state.is_loading is False

    @pytest.mark.asyncio
    async def test_success_stores_recipe(self):
        captured = []

        def handler(request):
            captured.append(request)
            return httpx.Response(200, json={"recipe": MOCK_RECIPE})

        store = make_store(handler)
        store.add_ingredient("양파")
        store.add_tool("프라이팬")
        store.set_preferences(cuisine="한식", cooking_time=15)
        store.set_preset("michelin_chef")

        await store.generate_recipe()

        state = store.state
        assert state.recipe == MOCK_RECIPE
        assert state.is_loading is False
        assert state.error is None

        body = json.loads(captured[0].content)
        assert captured[0].url.path == "/api/recipe"
        assert body["ingredients"] == ["양파"]
        assert body["tools"] == ["프라이팬"]
        assert body["preferences"] == {"cuisine": "한식", "cookingTime": 15}
        assert body["chefConfig"]["name"] == find_preset_by_id("michelin_chef").config.name

    @pytest.mark.asyncio
    async def test_raw_text_result_is_stored(self):
        store = make_store(lambda request: httpx.Response(200, json={"recipe": {"rawText": "텍스트 레시피"}}))
        store.add_ingredient("양파")

        await store.generate_recipe()

        assert store.state.recipe == {"rawText": "텍스트 레시피"}

    @pytest.mark.asyncio
    async def test_http_error_sets_error(self):
        store = make_store(lambda request: httpx.Response(500, json={"error": "boom"}))
        store.add_ingredient("양파")

        await store.generate_recipe()

        assert "500" in store.state.error
        assert store.state.is_loading is False
        assert store.state.recipe is None

    @pytest.mark.asyncio
    async def test_network_error_sets_error(self):
        def handler(request):
            raise httpx.ConnectError("네트워크 오류")

        store = make_store(handler)
        store.add_ingredient("양파")

        await store.generate_recipe()

        assert store.state.error == "네트워크 오류"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [["x"], {"recipe": "그냥 문자열"}])
    async def test_malformed_reply_sets_error(self, payload):
        store = make_store(lambda request: httpx.Response(200, json=payload))
        store.add_ingredient("양파")

        await store.generate_recipe()

        assert store.state.is_loading is False
        assert store.state.error
        assert store.state.recipe is None


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_restores_initial_state(self):
        store = make_store(lambda request: httpx.Response(200, json={"recipe": MOCK_RECIPE}))
        store.add_ingredient("양파")
        store.add_tool("프라이팬")
        store.set_preferences(servings=4)
        store.set_preset("michelin_chef")
        await store.generate_recipe()

        store.reset()

        state = store.state
        assert state.ingredients == []
        assert state.tools == []
        assert state.recipe is None
        assert state.preferences.servings is None
        assert state.selected_preset_id == "korean_grandma"
        assert state.error is None
