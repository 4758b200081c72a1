"""
Anthropic Messages API implementation of AIService.
Makes one POST per call; retries are left to the caller's fallback.
"""

from typing import Any, Dict

import httpx

from ideaspark.constants import (
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    PLACEHOLDER_API_KEY,
)
from ideaspark.exceptions import ResponseFormatError, TextGenerationError
from ideaspark.services.ai_service import AIService
from ideaspark.services.response_parser import extract_text
from ideaspark.utils.logger import logger


class AnthropicService(AIService):
    """Anthropic service implementation."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        api_url: str = DEFAULT_API_URL,
        api_version: str = DEFAULT_API_VERSION,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float = DEFAULT_TIMEOUT,
        transport=None,
    ):
        """
        Initialize the Anthropic service.

        Args:
            api_key: Anthropic API key
            model: Model identifier sent with every request
            api_url: Messages endpoint
            api_version: Value of the anthropic-version header
            max_tokens: Default response token budget
            temperature: Sampling temperature
            timeout: Transport timeout in seconds
            transport: Optional httpx transport, used in tests
        """
        self.api_key = (api_key or "").strip()
        self.model = model
        self.api_url = api_url
        self.api_version = api_version
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    def _headers(self) -> Dict[str, str]:
        return {
            "content-type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": self.api_version,
        }

    def _payload(self, prompt: str, max_tokens: int = None) -> Dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": max_tokens or self.max_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }

    def _read_response(self, response: httpx.Response) -> str:
        if response.status_code >= 400:
            logger.error(f"Anthropic API error: {response.status_code} {response.text[:500]}")
            raise TextGenerationError(f"Anthropic API error: {response.status_code}")

        try:
            envelope = response.json()
        except ValueError as e:
            raise ResponseFormatError(f"Anthropic API returned a non-JSON body: {e}") from e

        return extract_text(envelope)

    def complete(self, prompt: str, max_tokens: int = None) -> str:
        logger.debug(f"Sending prompt to {self.model} ({len(prompt)} chars)")
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.api_url, headers=self._headers(), json=self._payload(prompt, max_tokens))
        except httpx.HTTPError as e:
            raise TextGenerationError(f"Request to Anthropic API failed: {e}") from e

        return self._read_response(response)

    async def complete_async(self, prompt: str, max_tokens: int = None) -> str:
        logger.debug(f"Sending prompt to {self.model} ({len(prompt)} chars)")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url, headers=self._headers(), json=self._payload(prompt, max_tokens)
                )
        except httpx.HTTPError as e:
            raise TextGenerationError(f"Request to Anthropic API failed: {e}") from e

        return self._read_response(response)
