import json

import httpx
import pytest

from rikucook.agents import CompletionAgent, RecipeAgent, RecipeFinderAgent
from rikucook.config import CompletionSettings

STIR_FRY_TEXT = (
    '```json\n{"recipes":[{"name":"Stir Fry","description":"Quick veggie stir fry",'
    '"additionalIngredients":["soy sauce"],"cookingTime":"15 minutes"}]}\n```'
)


def completion_body(*texts: str) -> dict:
    return {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": text} for text in texts],
    }


class FakeCompletionAPI:
    """Records every request and answers with a canned response."""

    def __init__(self, status_code: int = 200, body=None, raw: bytes = None):
        self.status_code = status_code
        self.body = body if body is not None else completion_body(STIR_FRY_TEXT)
        self.raw = raw
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    def sent_json(self, index: int = 0) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def settings():
    return CompletionSettings(api_url="https://completion.test/v1/messages")


@pytest.fixture
def fake_api():
    return FakeCompletionAPI()


def build_finder(settings: CompletionSettings, api: FakeCompletionAPI) -> RecipeFinderAgent:
    completion_agent = CompletionAgent(settings, transport=httpx.MockTransport(api))
    return RecipeFinderAgent(RecipeAgent(completion_agent))
