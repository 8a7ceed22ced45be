from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from openai import OpenAI

from .config import Settings
from .errors import MissingCredentialError, TransportError

logger = logging.getLogger(__name__)


class GenerationClient:
    """Read-only handle to the text-generation service.

    Built once per process. A missing credential does not prevent
    construction; callers check `has_credential` before each request.
    """

    def __init__(self, settings: Settings, sdk: Optional[Any] = None) -> None:
        self.settings = settings
        # The SDK rejects an empty key at construction; build it only with one.
        if sdk is None and settings.has_credential:
            sdk = _build_sdk(settings)
        self._sdk = sdk
        if not settings.has_credential:
            logger.warning(
                "No API key found for the generation service; "
                "set SALES_ADVISOR_API_KEY or GEMINI_API_KEY. Requests will be refused."
            )

    @property
    def has_credential(self) -> bool:
        return self.settings.has_credential

    @property
    def model(self) -> str:
        return self.settings.model

    def generate(self, prompt: str, *, response_schema: Optional[dict[str, Any]] = None) -> str:
        """Send one prompt and return the response text.

        With `response_schema` the service is asked for JSON matching it.
        Any failure of the call is raised as TransportError.
        """
        request: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if response_schema is not None:
            request["response_format"] = {
                "type": "json_schema",
                "json_schema": {"name": "response", "schema": response_schema},
            }
        logger.debug("Generation request: model=%s structured=%s", self.model, response_schema is not None)
        if self._sdk is None:
            raise MissingCredentialError("No API key configured for the generation service.")
        try:
            resp = self._sdk.chat.completions.create(**request)
            text = resp.choices[0].message.content
        except Exception as e:
            raise TransportError(str(e) or e.__class__.__name__) from e
        return text or ""


def _build_sdk(settings: Settings) -> OpenAI:
    kwargs: dict[str, Any] = {
        "api_key": settings.api_key,
        "base_url": settings.base_url,
        "max_retries": 0,
    }
    if settings.timeout is not None:
        kwargs["timeout"] = settings.timeout
    return OpenAI(**kwargs)


_client: Optional[GenerationClient] = None
_client_lock = threading.Lock()


def get_client() -> GenerationClient:
    """Return the process-wide client, building it from the environment on first use."""
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = GenerationClient(Settings.from_env(strict=False))
    return _client


def set_client(client: Optional[GenerationClient]) -> None:
    """Install a specific client (or None to rebuild from the environment next time)."""
    global _client
    with _client_lock:
        _client = client


def reset_client() -> None:
    set_client(None)
