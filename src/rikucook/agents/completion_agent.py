import logging
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from rikucook.config import CompletionSettings
from rikucook.errors import RecipeRequestError
from rikucook.schema import CompletionMessage, CompletionRequest, CompletionResponse

logger = logging.getLogger(__name__)


class CompletionAgent:
    """Posts a single user prompt to the completion API."""

    def __init__(self, settings: CompletionSettings, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings
        # Tests hand in an httpx.MockTransport; it serves both sync and async clients
        self.transport = transport

    def build_request(self, prompt: str) -> CompletionRequest:
        return CompletionRequest(
            model=self.settings.model,
            max_tokens=self.settings.max_tokens,
            messages=[CompletionMessage(role="user", content=prompt)],
        )

    def headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "anthropic-version": self.settings.api_version,
        }
        if self.settings.api_key:
            headers["x-api-key"] = self.settings.api_key
        return headers

    def invoke(self, prompt: str) -> CompletionResponse:
        payload = self.build_request(prompt).model_dump()
        try:
            with httpx.Client(transport=self.transport, timeout=self.settings.timeout) as client:
                response = client.post(self.settings.api_url, json=payload, headers=self.headers())
            return self._read(response)
        except httpx.HTTPError as exc:
            raise RecipeRequestError(f"Completion API call failed: {exc}") from exc

    async def ainvoke(self, prompt: str) -> CompletionResponse:
        payload = self.build_request(prompt).model_dump()
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.settings.timeout) as client:
                response = await client.post(self.settings.api_url, json=payload, headers=self.headers())
            return self._read(response)
        except httpx.HTTPError as exc:
            raise RecipeRequestError(f"Completion API call failed: {exc}") from exc

    def _read(self, response: httpx.Response) -> CompletionResponse:
        logger.debug("Completion API answered %s", response.status_code)
        response.raise_for_status()
        try:
            return CompletionResponse.model_validate(response.json())
        except ValidationError as exc:
            raise RecipeRequestError(f"Unexpected completion response shape: {exc}") from exc
        except (ValueError, RecursionError) as exc:
            raise RecipeRequestError(f"Completion response is not JSON: {exc}") from exc
