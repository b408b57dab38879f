"""Unit tests for the HTTP endpoints.

The gateway functions are patched where the router imports them, so no
provider call is made.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from chefmate.api.app import create_app
from chefmate.models.models import ChatContext, ChefConfig
from chefmate.services.gemini import CompletionError, ConfigurationError


@pytest.fixture
def client():
    return TestClient(create_app())


class TestChatEndpoint:
    """Tests for POST /api/chat."""

    @patch("chefmate.api.routes.send_message", new_callable=AsyncMock)
    def test_valid_request_returns_response(self, mock_send, client, valid_chef_config):
        mock_send.return_value = "맛있는 김치찌개 레시피입니다."

        res = client.post("/api/chat", json={"message": "김치찌개 만들어줘", "chefConfig": valid_chef_config})

        assert res.status_code == 200
        assert res.json() == {"response": "맛있는 김치찌개 레시피입니다."}

    @patch("chefmate.api.routes.send_message", new_callable=AsyncMock)
    def test_empty_message_returns_400(self, mock_send, client, valid_chef_config):
        res = client.post("/api/chat", json={"message": "", "chefConfig": valid_chef_config})

        assert res.status_code == 400
        data = res.json()
        assert data["error"]
        assert data["details"][0]["loc"] == ["message"]
        mock_send.assert_not_called()

    @patch("chefmate.api.routes.send_message", new_callable=AsyncMock)
    def test_missing_chef_config_returns_400(self, mock_send, client):
        res = client.post("/api/chat", json={"message": "안녕"})

        assert res.status_code == 400
        assert any(issue["loc"] == ["chefConfig"] for issue in res.json()["details"])

    @patch("chefmate.api.routes.send_message", new_callable=AsyncMock)
    def test_invalid_enum_lists_every_issue(self, mock_send, client, valid_chef_config):
        bad_config = {**valid_chef_config, "personality": "grumpy", "expertise": []}

        res = client.post("/api/chat", json={"message": "안녕", "chefConfig": bad_config})

        assert res.status_code == 400
        locations = [issue["loc"] for issue in res.json()["details"]]
        assert ["chefConfig", "personality"] in locations
        assert ["chefConfig", "expertise"] in locations

    @patch("chefmate.api.routes.send_message", new_callable=AsyncMock)
    def test_snake_case_keys_are_rejected(self, mock_send, client, valid_chef_config):
        res = client.post("/api/chat", json={"message": "안녕", "chef_config": valid_chef_config})

        assert res.status_code == 400
        assert any(issue["loc"] == ["chefConfig"] for issue in res.json()["details"])
        mock_send.assert_not_called()

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_nested_snake_case_keys_are_rejected(self, mock_generate, client, valid_chef_config):
        style = valid_chef_config["speakingStyle"]
        bad_config = {**valid_chef_config, "speakingStyle": {**style, "emoji_usage": style["emojiUsage"]}}
        del bad_config["speakingStyle"]["emojiUsage"]

        res = client.post("/api/recipe", json={"ingredients": ["계란"], "chefConfig": bad_config})

        assert res.status_code == 400
        mock_generate.assert_not_called()

    def test_malformed_json_returns_400(self, client):
        res = client.post("/api/chat", content=b"{not json", headers={"Content-Type": "application/json"})

        assert res.status_code == 400
        assert res.json()["details"][0]["type"] == "json_invalid"

    @patch("chefmate.api.routes.send_message", new_callable=AsyncMock)
    def test_context_is_passed_through(self, mock_send, client, valid_chef_config):
        mock_send.return_value = "김치로 만들 수 있어요!"

        res = client.post(
            "/api/chat",
            json={
                "message": "뭐 만들까?",
                "chefConfig": valid_chef_config,
                "context": {"ingredients": ["김치", "두부"], "tools": ["냄비"]},
            },
        )

        assert res.status_code == 200
        mock_send.assert_awaited_once_with(
            "뭐 만들까?",
            ChefConfig.model_validate(valid_chef_config),
            ChatContext(ingredients=["김치", "두부"], tools=["냄비"]),
        )

    @patch("chefmate.api.routes.send_message", new_callable=AsyncMock)
    def test_completion_error_returns_500(self, mock_send, client, valid_chef_config):
        mock_send.side_effect = CompletionError("AI response generation failed: API rate limit")

        res = client.post("/api/chat", json={"message": "테스트", "chefConfig": valid_chef_config})

        assert res.status_code == 500
        assert "오류" in res.json()["error"]
        # Provider details stay in the logs
        assert "rate limit" not in res.json()["error"]

    @patch("chefmate.api.routes.send_message", new_callable=AsyncMock)
    def test_missing_api_key_returns_500(self, mock_send, client, valid_chef_config):
        mock_send.side_effect = ConfigurationError("GEMINI_API_KEY environment variable is required")

        res = client.post("/api/chat", json={"message": "테스트", "chefConfig": valid_chef_config})

        assert res.status_code == 500


class TestRecipeEndpoint:
    """Tests for POST /api/recipe."""

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_valid_request_returns_recipe(self, mock_generate, client, valid_chef_config):
        mock_recipe = {"title": "김치찌개", "description": "매콤한 김치찌개"}
        mock_generate.return_value = mock_recipe

        res = client.post("/api/recipe", json={"ingredients": ["김치", "두부"], "chefConfig": valid_chef_config})

        assert res.status_code == 200
        assert res.json() == {"recipe": mock_recipe}

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_raw_text_result_is_returned(self, mock_generate, client, valid_chef_config):
        mock_generate.return_value = {"rawText": "그냥 텍스트"}

        res = client.post("/api/recipe", json={"ingredients": ["김치"], "chefConfig": valid_chef_config})

        assert res.status_code == 200
        assert res.json()["recipe"] == {"rawText": "그냥 텍스트"}

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_empty_ingredients_returns_400(self, mock_generate, client, valid_chef_config):
        res = client.post("/api/recipe", json={"ingredients": [], "chefConfig": valid_chef_config})

        assert res.status_code == 400
        assert res.json()["error"]
        mock_generate.assert_not_called()

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_missing_ingredients_returns_400(self, mock_generate, client, valid_chef_config):
        res = client.post("/api/recipe", json={"chefConfig": valid_chef_config})

        assert res.status_code == 400

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_invalid_difficulty_returns_400(self, mock_generate, client, valid_chef_config):
        res = client.post(
            "/api/recipe",
            json={"ingredients": ["계란"], "preferences": {"difficulty": "extreme"}, "chefConfig": valid_chef_config},
        )

        assert res.status_code == 400

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_tools_and_preferences_are_passed_through(self, mock_generate, client, valid_chef_config):
        mock_generate.return_value = {"title": "된장찌개"}

        res = client.post(
            "/api/recipe",
            json={
                "ingredients": ["된장", "두부"],
                "tools": ["냄비", "가스레인지"],
                "preferences": {"cuisine": "한식", "cookingTime": 30},
                "chefConfig": valid_chef_config,
            },
        )

        assert res.status_code == 200
        request, chef_config = mock_generate.await_args.args
        assert request.ingredients == ["된장", "두부"]
        assert request.tools == ["냄비", "가스레인지"]
        assert request.preferences.cuisine == "한식"
        assert request.preferences.cooking_time == 30
        assert chef_config == ChefConfig.model_validate(valid_chef_config)

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_defaults_applied_when_omitted(self, mock_generate, client, valid_chef_config):
        mock_generate.return_value = {"title": "계란말이"}

        client.post("/api/recipe", json={"ingredients": ["계란"], "chefConfig": valid_chef_config})

        request, _ = mock_generate.await_args.args
        assert request.tools == []
        assert request.preferences.model_dump(exclude_none=True) == {}

    @patch("chefmate.api.routes.generate_recipe", new_callable=AsyncMock)
    def test_generation_error_returns_500(self, mock_generate, client, valid_chef_config):
        mock_generate.side_effect = CompletionError("Recipe generation failed: quota exceeded")

        res = client.post("/api/recipe", json={"ingredients": ["김치"], "chefConfig": valid_chef_config})

        assert res.status_code == 500
        assert "오류" in res.json()["error"]


class TestHealthEndpoint:
    def test_health(self, client):
        res = client.get("/api/health")

        assert res.status_code == 200
        assert res.json() == {"status": "ok"}
