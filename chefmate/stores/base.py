"""Minimal observable state container.

A store owns one immutable state snapshot (a pydantic model). Actions replace
the snapshot through ``set_state`` and every subscriber is called with the new
snapshot. Only the store's own actions write to it.
"""

from typing import Callable, Generic, TypeVar

import httpx
from pydantic import BaseModel

from chefmate.utils.config import config


StateT = TypeVar("StateT", bound=BaseModel)
Listener = Callable[[StateT], None]

UNKNOWN_ERROR_MESSAGE = "알 수 없는 오류"


class ApiError(Exception):
    """Non-2xx response from the chef API."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"API 오류: {status_code}")
        self.status_code = status_code


class Store(Generic[StateT]):
    """Single-owner state cell with subscribers."""

    def __init__(self, initial_state: StateT) -> None:
        self._state = initial_state
        self._listeners: list[Listener] = []

    @property
    def state(self) -> StateT:
        return self._state

    def get_state(self) -> StateT:
        return self._state

    def set_state(self, **changes) -> None:
        """Replace the snapshot with a copy carrying ``changes`` and notify subscribers."""
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            listener(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class ApiStore(Store[StateT]):
    """Store that talks to the chef HTTP API.

    Args:
        initial_state: First snapshot.
        base_url: API root, defaults to ``config.API_BASE_URL``.
        transport: Optional httpx transport (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        initial_state: StateT,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(initial_state)
        self._base_url = base_url or config.API_BASE_URL
        self._transport = transport

    async def _post_json(self, path: str, body: dict) -> dict:
        """POST ``body`` and return the decoded JSON reply.

        Raises:
            ApiError: On a non-2xx status.
            httpx.HTTPError: On network failure.
        """
        async with httpx.AsyncClient(
            base_url=self._base_url,
            transport=self._transport,
            timeout=config.HTTP_TIMEOUT,
        ) as client:
            response = await client.post(path, json=body)

        if not response.is_success:
            raise ApiError(response.status_code)
        return response.json()

    @staticmethod
    def _error_message(error: Exception) -> str:
        return str(error) or UNKNOWN_ERROR_MESSAGE
