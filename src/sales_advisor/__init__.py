"""Dataset insight and regression-variable suggestions from a hosted LLM."""

from .client import GenerationClient, get_client, reset_client, set_client
from .config import Settings
from .errors import (
    AdvisorError,
    ConfigError,
    ErrorKind,
    MissingCredentialError,
    ResponseParseError,
    ResponseShapeError,
    SuggestionError,
    TransportError,
)
from .insights import get_dataset_insights, is_error_text, run_dataset_insights
from .models import InsightOutcome, VariableSuggestion
from .suggestions import get_variable_suggestions

__all__ = [
    "AdvisorError",
    "ConfigError",
    "ErrorKind",
    "GenerationClient",
    "InsightOutcome",
    "MissingCredentialError",
    "ResponseParseError",
    "ResponseShapeError",
    "Settings",
    "SuggestionError",
    "TransportError",
    "VariableSuggestion",
    "get_client",
    "get_dataset_insights",
    "get_variable_suggestions",
    "is_error_text",
    "reset_client",
    "run_dataset_insights",
    "set_client",
]
