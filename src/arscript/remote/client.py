"""Remote screenplay classifier over an OpenAI-compatible chat API."""

from __future__ import annotations

import json
from typing import Any

import httpx
import jsonschema
from jsonschema.exceptions import ValidationError as SchemaValidationError

from arscript.config import ArScriptSettings, get_logger
from arscript.exceptions import (
    ConfigurationError,
    EmptyResultError,
    MalformedResponseError,
    RemoteNetworkError,
)
from arscript.parser.models import ScreenplayElement, element_from_dict
from arscript.remote.schema import (
    ELEMENT_ARRAY_SCHEMA,
    build_messages,
    build_response_format,
)

logger = get_logger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class RemoteClassifier:
    """Classify script text with a schema-constrained remote model.

    Produces the same element sequence type as the local classifier. Every
    failure surfaces as a ``RemoteClassificationError`` subclass so callers
    can keep what they already display.
    """

    def __init__(
        self,
        endpoint: str | None,
        api_key: str | None,
        model: str | None = None,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the remote classifier.

        Args:
            endpoint: Base URL of the OpenAI-compatible API
            api_key: Bearer token for the API
            model: Model name, defaults to ``DEFAULT_MODEL``
            timeout: HTTP timeout in seconds
            client: Optional preconfigured HTTP client (closed on exit only
                when created here)
        """
        if not endpoint or not api_key:
            raise ConfigurationError(
                message="Remote classifier is not configured",
                hint="Set ARSCRIPT_LLM_ENDPOINT and ARSCRIPT_LLM_API_KEY",
                details={
                    "has_endpoint": bool(endpoint),
                    "has_api_key": bool(api_key),
                },
            )
        self.base_url = endpoint.rstrip("/")
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_settings(
        cls, settings: ArScriptSettings, client: httpx.AsyncClient | None = None
    ) -> RemoteClassifier:
        """Create a classifier from application settings."""
        return cls(
            endpoint=settings.llm_endpoint,
            api_key=settings.llm_api_key,
            model=settings.llm_model,
            timeout=settings.llm_timeout,
            client=client,
        )

    async def __aenter__(self) -> RemoteClassifier:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *_: Any) -> None:
        """Exit async context manager and cleanup."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def classify(self, raw_text: str) -> tuple[ScreenplayElement, ...]:
        """Classify raw script text remotely.

        Args:
            raw_text: Raw script text

        Returns:
            Elements in document order

        Raises:
            RemoteNetworkError: On transport failure or a non-200 status
            MalformedResponseError: If the payload does not match the schema
            EmptyResultError: If no elements come back for non-blank input
        """
        if not raw_text.strip():
            return ()

        payload = await self._request(raw_text)
        items = self._extract_items(payload)
        elements = self._to_elements(items)
        if not elements:
            raise EmptyResultError(
                message="Remote classifier returned no elements",
                hint="Try again or use the local classifier",
                details={"model": self.model, "input_length": len(raw_text)},
            )

        logger.info(
            "Remote classification successful",
            model=self.model,
            elements=len(elements),
        )
        return elements

    async def _request(self, raw_text: str) -> dict[str, Any]:
        completions_url = f"{self.base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        body = {
            "model": self.model,
            "messages": build_messages(raw_text),
            "temperature": 0.0,
            "response_format": build_response_format(),
        }

        logger.info(
            "Sending remote classification request",
            endpoint=completions_url,
            model=self.model,
            input_length=len(raw_text),
        )

        try:
            response = await self.client.post(completions_url, headers=headers, json=body)
        except httpx.HTTPError as e:
            logger.error(
                "Remote classification request failed",
                error=str(e),
                error_type=type(e).__name__,
                endpoint=completions_url,
            )
            raise RemoteNetworkError(
                "Could not reach the remote classifier",
                endpoint=completions_url,
                original_error=e,
            ) from e

        if response.status_code != 200:
            error_text = response.text
            logger.error(
                "Remote classifier API error",
                status_code=response.status_code,
                error_text=error_text[:500],
                endpoint=completions_url,
            )
            raise RemoteNetworkError(
                f"Remote classifier answered with HTTP {response.status_code}",
                status_code=response.status_code,
                endpoint=completions_url,
            )

        try:
            data = response.json()
        except json.JSONDecodeError as e:
            raise MalformedResponseError(
                message="Remote classifier response is not JSON",
                details={"error": str(e)},
            ) from e
        if not isinstance(data, dict):
            raise MalformedResponseError(
                message="Remote classifier response is not a JSON object",
                details={"found": type(data).__name__},
            )
        return data

    def _extract_items(self, data: dict[str, Any]) -> list[Any]:
        """Pull the element array out of a chat completion payload."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError(
                message="Remote classifier response has no message content",
                details={"keys": sorted(data)},
            ) from e

        if not isinstance(content, str):
            raise MalformedResponseError(
                message="Remote classifier message content is not text",
                details={"found": type(content).__name__},
            )

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(
                "Remote classifier returned invalid JSON",
                error=str(e),
                response_preview=content[:200],
            )
            raise MalformedResponseError(
                message="Remote classifier returned invalid JSON",
                hint="The model might have returned an invalid format",
                details={"error": str(e)},
            ) from e

        if isinstance(parsed, dict) and "elements" in parsed:
            parsed = parsed["elements"]
        if not isinstance(parsed, list):
            raise MalformedResponseError(
                message="Remote classifier result is not an array",
                details={"found": type(parsed).__name__},
            )
        return parsed

    def _to_elements(self, items: list[Any]) -> tuple[ScreenplayElement, ...]:
        try:
            jsonschema.validate(items, ELEMENT_ARRAY_SCHEMA)
        except SchemaValidationError as e:
            raise MalformedResponseError(
                message="Remote classifier result violates the element schema",
                details={"error": e.message, "path": list(e.absolute_path)},
            ) from e

        try:
            return tuple(element_from_dict(item) for item in items)
        except ValueError as e:
            raise MalformedResponseError(
                message="Remote classifier returned an invalid element",
                details={"error": str(e)},
            ) from e
