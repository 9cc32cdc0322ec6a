"""Gemini Text Client - single entry point for generative text calls."""

import logging
from typing import Any, Callable, Optional

import google.genai as genai
from google.genai import errors as genai_errors
from google.genai import types

from vocab_reader.core import ConfigurationError, MalformedResponse, UpstreamError

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, int], Any]


def _default_client_factory(api_key: str, timeout_ms: int) -> genai.Client:
    return genai.Client(api_key=api_key, http_options=types.HttpOptions(timeout=timeout_ms))


def _preview(text: str, limit: int = 100) -> str:
    return repr(text[:limit]) + ("..." if len(text) > limit else "")


class GeminiTextClient:
    """
    Sends one user instruction to Gemini and returns the completion text.

    Failures are raised as the reader error taxonomy:
    - ConfigurationError: no API key (checked before any request is built)
    - UpstreamError: API status error, network failure, or timeout
    - MalformedResponse: the call succeeded but carried no completion text

    No retries are attempted; callers decide how to surface the error.
    """

    DEFAULT_MODEL = "gemini-2.0-flash"

    def __init__(
        self,
        api_key_provider: Callable[[], Optional[str]],
        model_name: str = DEFAULT_MODEL,
        timeout_seconds: float = 60.0,
        client_factory: ClientFactory = _default_client_factory,
    ):
        self._api_key_provider = api_key_provider
        self.model_name = model_name
        self.timeout_seconds = timeout_seconds
        self._client_factory = client_factory

    def require_api_key(self) -> str:
        """Return the configured API key or raise ConfigurationError."""
        api_key = self._api_key_provider()
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set")
        return api_key

    def generate(
        self,
        prompt: str,
        max_output_tokens: int,
        temperature: float,
        response_mime_type: Optional[str] = None,
    ) -> str:
        """
        Run a single-turn generation.

        Args:
            prompt: The full user instruction.
            max_output_tokens: Output length cap.
            temperature: Sampling temperature.
            response_mime_type: e.g. ``application/json`` for structured output.

        Returns:
            Stripped completion text.
        """
        api_key = self.require_api_key()
        client = self._client_factory(api_key, int(self.timeout_seconds * 1000))

        logger.debug(
            "Gemini request: model=%s max_tokens=%d temperature=%.2f prompt=%s",
            self.model_name,
            max_output_tokens,
            temperature,
            _preview(prompt),
        )

        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    max_output_tokens=max_output_tokens,
                    temperature=temperature,
                    response_mime_type=response_mime_type,
                ),
            )
        except genai_errors.APIError as exc:
            logger.error("Gemini API error: status=%s message=%s details=%s", exc.code, exc.message, exc.details)
            raise UpstreamError(f"Gemini API error {exc.code}: {exc.message}", status=exc.code, payload=exc.details) from exc
        except Exception as exc:
            logger.error("Gemini request failed: %s: %s", type(exc).__name__, exc)
            raise UpstreamError(f"Gemini request failed: {exc}") from exc

        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            logger.error("Gemini response without completion text: %r", response)
            raise MalformedResponse("Response has no completion text", payload=response)

        logger.debug("Gemini response: %d chars", len(text))
        return text.strip()
