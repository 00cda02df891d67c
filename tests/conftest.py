"""
Shared test doubles: fake and mock-transport OpenAI clients, and a mock-transport search client.

No test touches the network.
"""

from types import SimpleNamespace
from typing import Any, Callable

import httpx
import pytest
from openai import AsyncOpenAI


@pytest.fixture
def search_url() -> str:
    return "https://search.test/search"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class FakeCompletions:
    """Stands in for client.chat.completions; records every create() call."""

    def __init__(self, reply: Callable[[list[dict]], Any]) -> None:
        self._reply = reply
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        result = self._reply(kwargs["messages"])
        if isinstance(result, Exception):
            raise result
        return result


class FakeCompletionClient:
    def __init__(self, reply: Callable[[list[dict]], Any]) -> None:
        self.completions = FakeCompletions(reply)
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self) -> list[dict[str, Any]]:
        return self.completions.calls


def completion(*texts: str | None) -> SimpleNamespace:
    """Build a chat-completion-shaped response with one choice per text."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=t)) for t in texts]
    )


@pytest.fixture
def make_completion_client() -> Callable[..., FakeCompletionClient]:
    """Factory: pass a callable (messages -> response or exception) or a fixed text."""

    def _make(reply: Any = "ok") -> FakeCompletionClient:
        if callable(reply):
            return FakeCompletionClient(reply)
        return FakeCompletionClient(lambda messages: completion(reply))

    return _make


@pytest.fixture
def echo_client(make_completion_client) -> FakeCompletionClient:
    """Completion client that answers with the first line of the user message."""

    def _echo(messages: list[dict]) -> SimpleNamespace:
        user = messages[-1]["content"]
        return completion(user.splitlines()[0])

    return make_completion_client(_echo)


@pytest.fixture
def make_search_client() -> Callable[..., httpx.AsyncClient]:
    """Factory: httpx.AsyncClient over a MockTransport driven by `handler`; requests are recorded."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], seen: list | None = None) -> httpx.AsyncClient:
        def _record(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return handler(request)

        return httpx.AsyncClient(
            transport=httpx.MockTransport(_record),
            headers={"X-API-KEY": "test-serper-key", "Content-Type": "application/json"},
        )

    return _make


@pytest.fixture
def search_payload() -> dict:
    return {"results": [{"title": "X"}]}


@pytest.fixture
def ok_search_client(make_search_client, search_payload) -> httpx.AsyncClient:
    return make_search_client(lambda request: httpx.Response(200, json=search_payload))


@pytest.fixture
def completion_response() -> Callable[..., SimpleNamespace]:
    return completion


@pytest.fixture
def make_openai_client() -> Callable[..., AsyncOpenAI]:
    """Factory: a real AsyncOpenAI whose HTTP replies come from `handler`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key="sk-test",
            base_url="https://openai.test/v1",
            max_retries=0,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

    return _make
