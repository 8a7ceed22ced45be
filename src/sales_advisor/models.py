from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ErrorKind


class VariableSuggestion(BaseModel):
    """
    Model-suggested regression variables.

    dependent_var: column most likely to represent sales (wire name `dependentVar`)
    independent_vars: predictor columns, in the order the model gave them
        (wire name `independentVars`)
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    dependent_var: str = Field(alias="dependentVar")
    independent_vars: list[str] = Field(default_factory=list, alias="independentVars")

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


class InsightOutcome(BaseModel):
    """
    Tagged result of the narrative insight operation.

    ok: True when `text` holds the model's answer
    text: answer text on success, localized error text on failure
    error_kind: failure category when ok is False
    error: underlying error message when ok is False
    """
    model_config = ConfigDict(frozen=True)

    ok: bool
    text: str
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None


class AdvisorRequest(BaseModel):
    """
    Request file consumed by the CLI.

    headers: ordered column names; derived from the first sample row when omitted
    stats: pre-computed descriptive statistics, forwarded as is
    sample: sample row records
    """
    headers: list[str] = Field(default_factory=list)
    stats: dict[str, Any] = Field(default_factory=dict)
    sample: list[dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _derive_headers(self) -> "AdvisorRequest":
        if not self.headers and self.sample:
            self.headers = [str(k) for k in self.sample[0].keys()]
        return self
