"""Shared fixtures for unit tests."""

import pytest

from chefmate.models.models import ChefConfig


@pytest.fixture
def valid_chef_config() -> dict:
    """Minimal persona config as it arrives on the wire (camelCase)."""
    return {
        "name": "테스트 셰프",
        "personality": "friendly",
        "expertise": ["한식"],
        "speakingStyle": {
            "formality": "casual",
            "emojiUsage": "medium",
            "technicality": "general",
        },
    }


@pytest.fixture
def chef_config() -> ChefConfig:
    return ChefConfig(
        name="테스트 셰프",
        personality="friendly",
        expertise=["한식", "일식"],
        cooking_philosophy="맛있게 요리합시다",
        speaking_style={"formality": "casual", "emoji_usage": "medium", "technicality": "general"},
    )


@pytest.fixture
def gemini_key(monkeypatch):
    """Provide a credential so model handles can be built."""
    from chefmate.utils.config import config

    monkeypatch.setattr(config, "GEMINI_API_KEY", "test-key")
    return "test-key"
