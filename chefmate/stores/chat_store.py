"""Chat transcript store.

Appends the user's message immediately, calls ``POST /api/chat`` with the
selected persona and appends the assistant reply only when one is received.
"""

import time
import uuid
from typing import List, Optional

import httpx
from pydantic import BaseModel, Field

from chefmate.models.models import ChatMessage
from chefmate.presets.presets import resolve_preset_config
from chefmate.stores.base import ApiStore
from chefmate.utils.config import config
from chefmate.utils.logger import logger


NO_REPLY_MESSAGE = "응답을 받지 못했습니다."


class ChatState(BaseModel):
    messages: List[ChatMessage] = Field(default_factory=list)
    selected_preset_id: str = Field(default_factory=lambda: config.DEFAULT_PRESET_ID)
    is_loading: bool = False
    error: Optional[str] = None


def _new_message(role: str, content: str) -> ChatMessage:
    return ChatMessage(
        id=f"{role}-{uuid.uuid4().hex[:12]}",
        role=role,
        content=content,
        timestamp=int(time.time() * 1000),
    )


class ChatStore(ApiStore[ChatState]):
    """Conversation with the currently selected chef persona."""

    def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        super().__init__(ChatState(), base_url=base_url, transport=transport)

    async def send_message(self, message: str) -> None:
        """Send ``message`` and append the reply.

        On failure the transcript keeps only the user's message and ``error``
        describes the HTTP status or network failure.
        """
        selected_preset_id = self.state.selected_preset_id

        self.set_state(
            messages=[*self.state.messages, _new_message("user", message)],
            is_loading=True,
            error=None,
        )

        try:
            data = await self._post_json(
                "/api/chat",
                {
                    "message": message,
                    "chefConfig": resolve_preset_config(selected_preset_id).model_dump(
                        mode="json", by_alias=True, exclude_none=True
                    ),
                },
            )
            reply = _new_message("assistant", data.get("response") or NO_REPLY_MESSAGE)
        except Exception as e:
            logger.warning(f"Chat request failed: {e}")
            self.set_state(is_loading=False, error=self._error_message(e))
            return

        self.set_state(messages=[*self.state.messages, reply], is_loading=False)

    def set_preset(self, preset_id: str) -> None:
        """Select a persona. Unknown ids are stored as-is and resolve to the first preset when sending."""
        self.set_state(selected_preset_id=preset_id)

    def clear_messages(self) -> None:
        self.set_state(messages=[], error=None)
