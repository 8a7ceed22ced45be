from __future__ import annotations

import logging
import math
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_LANGUAGE = "es"

SUPPORTED_LANGUAGES: tuple[str, ...] = ("es", "en")

# First non-empty wins.
CREDENTIAL_VARS: tuple[str, ...] = ("SALES_ADVISOR_API_KEY", "GEMINI_API_KEY", "API_KEY")


class Settings(BaseModel):
    """Process-wide settings for the generation client.

    api_key: credential for the generation service (None when not configured)
    model: model identifier sent with every request
    base_url: OpenAI-compatible endpoint serving the model
    language: language of prompts and error messages ("es" | "en")
    timeout: request timeout in seconds; None keeps the SDK default
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    language: str = DEFAULT_LANGUAGE
    timeout: Optional[float] = None

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, *, strict: bool = True) -> "Settings":
        """Read settings from the environment.

        With strict=False a malformed value is logged and replaced by its
        default instead of raising ConfigError.
        """
        env = os.environ if environ is None else environ
        return cls(
            api_key=_first_set(env, CREDENTIAL_VARS),
            model=_get(env, "SALES_ADVISOR_MODEL") or DEFAULT_MODEL,
            base_url=_get(env, "SALES_ADVISOR_BASE_URL") or DEFAULT_BASE_URL,
            language=normalize_language(_get(env, "SALES_ADVISOR_LANGUAGE")),
            timeout=_parse_float(env, "SALES_ADVISOR_TIMEOUT", strict=strict),
        )


def normalize_language(value: Optional[str]) -> str:
    if not value:
        return DEFAULT_LANGUAGE
    lang = value.strip().lower()[:2]
    if lang not in SUPPORTED_LANGUAGES:
        logger.warning("Unsupported language %r; falling back to %r.", value, DEFAULT_LANGUAGE)
        return DEFAULT_LANGUAGE
    return lang


def _get(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _first_set(env: Mapping[str, str], names: tuple[str, ...]) -> Optional[str]:
    for name in names:
        value = _get(env, name)
        if value:
            return value
    return None


def _parse_float(env: Mapping[str, str], name: str, *, strict: bool) -> Optional[float]:
    raw = _get(env, name)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value) or value <= 0:
        problem = f"{name} must be a positive number of seconds, got {raw!r}"
        if strict:
            raise ConfigError(problem)
        logger.warning("%s; using the SDK default.", problem)
        return None
    return value
