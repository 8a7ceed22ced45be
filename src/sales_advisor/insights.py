from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from .client import GenerationClient, get_client
from .errors import AdvisorError, ErrorKind
from .models import InsightOutcome
from .prompts import message, render_insights_prompt
from .serialize import Rows, sample_records, to_json_text

logger = logging.getLogger(__name__)


def build_insights_prompt(
    headers: Sequence[str],
    stats: Mapping[str, Any],
    sample_data: Rows,
    *,
    language: str,
) -> str:
    # The sample is forwarded as given; callers slice it beforehand.
    return render_insights_prompt(
        language,
        headers,
        to_json_text(stats),
        to_json_text(sample_records(sample_data)),
    )


def run_dataset_insights(
    headers: Sequence[str],
    stats: Mapping[str, Any],
    sample_data: Rows,
    *,
    client: Optional[GenerationClient] = None,
) -> InsightOutcome:
    """Ask the model for a Markdown analysis of the dataset summary.

    Never raises for service problems: failures are reported through the
    returned outcome (`ok=False`, `error_kind`, `error`) together with a
    localized error text ready to show to a user.
    """
    client = client or get_client()
    lang = client.settings.language

    if not client.has_credential:
        return InsightOutcome(
            ok=False,
            text=message(lang, "insights_missing_key"),
            error_kind=ErrorKind.MISSING_CREDENTIAL,
            error=message(lang, "insights_missing_key_detail"),
        )

    prompt = build_insights_prompt(headers, stats, sample_data, language=lang)
    try:
        text = client.generate(prompt)
    except AdvisorError as e:
        logger.error("Error calling the generation service for insights: %s", e)
        return InsightOutcome(
            ok=False,
            text=message(lang, "insights_failed", detail=str(e)),
            error_kind=e.kind,
            error=str(e),
        )
    return InsightOutcome(ok=True, text=text)


def get_dataset_insights(
    headers: Sequence[str],
    stats: Mapping[str, Any],
    sample_data: Rows,
    *,
    client: Optional[GenerationClient] = None,
) -> str:
    """Return the model's analysis text, or a localized error text.

    Errors are returned rather than raised; use `is_error_text` or
    `run_dataset_insights` to tell them apart.
    """
    return run_dataset_insights(headers, stats, sample_data, client=client).text


def is_error_text(text: str, *, language: str) -> bool:
    """Heuristic check on text returned by get_dataset_insights.

    A model answer that itself begins with the error prefix is misread as a
    failure; use run_dataset_insights and `InsightOutcome.ok` when that matters.
    """
    return text.startswith(message(language, "error_prefix"))
