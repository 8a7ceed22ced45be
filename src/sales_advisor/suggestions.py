from __future__ import annotations

import json
import logging
from typing import Optional, Sequence

from .client import GenerationClient, get_client
from .errors import (
    AdvisorError,
    ErrorKind,
    MissingCredentialError,
    ResponseParseError,
    ResponseShapeError,
    SuggestionError,
)
from .models import VariableSuggestion
from .prompts import message, render_suggestions_prompt, suggestion_schema
from .serialize import Rows, sample_records, to_json_text

logger = logging.getLogger(__name__)

# Rows of the sample sent with a suggestion request, whatever the caller passes.
SUGGESTION_SAMPLE_ROWS = 5


def build_suggestions_prompt(
    headers: Sequence[str],
    sample_data: Rows,
    *,
    language: str,
) -> str:
    rows = sample_records(sample_data, limit=SUGGESTION_SAMPLE_ROWS)
    return render_suggestions_prompt(language, headers, to_json_text(rows), n_rows=len(rows))


def parse_suggestion(
    text: str,
    *,
    language: str,
    headers: Optional[Sequence[str]] = None,
) -> VariableSuggestion:
    """Parse and validate the service's JSON answer.

    `dependentVar` must be a non-empty string and `independentVars` a list
    of strings (possibly empty); other keys are ignored. When `headers` is given,
    every suggested name must also be one of them.
    """
    raw = (text or "").strip()
    if not raw:
        raise ResponseParseError(message(language, "empty_response"))
    try:
        obj = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ResponseParseError(message(language, "bad_json", detail=str(e))) from e

    if not isinstance(obj, dict):
        raise ResponseShapeError(message(language, "bad_shape"))
    dep = obj.get("dependentVar")
    indep = obj.get("independentVars")
    if not isinstance(dep, str) or not dep or not isinstance(indep, list) or not all(isinstance(v, str) for v in indep):
        raise ResponseShapeError(message(language, "bad_shape"))

    suggestion = VariableSuggestion.model_validate({"dependentVar": dep, "independentVars": indep})

    if headers is not None:
        known = set(headers)
        unknown = [n for n in [suggestion.dependent_var, *suggestion.independent_vars] if n not in known]
        if unknown:
            raise ResponseShapeError(message(language, "unknown_columns", names=", ".join(unknown)))
    return suggestion


def get_variable_suggestions(
    headers: Sequence[str],
    sample_data: Rows,
    *,
    strict: bool = False,
    client: Optional[GenerationClient] = None,
) -> VariableSuggestion:
    """Ask the model which column to predict and which columns to predict it from.

    Raises MissingCredentialError before any request when no key is set.
    Every other failure (transport, invalid JSON, unexpected shape) is
    raised as SuggestionError with the original error chained.

    strict: also reject names that are not among `headers`.
    """
    client = client or get_client()
    lang = client.settings.language

    if not client.has_credential:
        raise MissingCredentialError(message(lang, "suggest_missing_key"))

    prompt = build_suggestions_prompt(headers, sample_data, language=lang)
    try:
        text = client.generate(prompt, response_schema=suggestion_schema(lang))
        return parse_suggestion(text, language=lang, headers=headers if strict else None)
    except Exception as e:
        logger.error("Error calling the generation service for suggestions: %s", e)
        kind = e.kind if isinstance(e, AdvisorError) else ErrorKind.TRANSPORT_FAILURE
        raise SuggestionError(message(lang, "suggest_failed", detail=str(e)), kind=kind) from e
