"""
Validation IR types.

A ``ValidationResult`` always carries all three issue categories; the
validator never short-circuits and never raises for a finding.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidationSeverity(StrEnum):
    """Issue severity, ordered error > warning > info."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK: dict[str, int] = {
    ValidationSeverity.ERROR: 2,
    ValidationSeverity.WARNING: 1,
    ValidationSeverity.INFO: 0,
}


class ValidationIssue(BaseModel):
    """One finding produced by a validation rule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    severity: ValidationSeverity
    code: str
    message: str
    token_names: list[str] | None = Field(default=None, alias="tokenNames")
    suggestion: str | None = None


class ValidationResult(BaseModel):
    """Categorized output of ``validate_tokens``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    valid: bool
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    info: list[ValidationIssue] = Field(default_factory=list)
    token_count: int = Field(default=0, alias="tokenCount")

    @property
    def issues(self) -> list[ValidationIssue]:
        """All issues, most severe first."""
        return [*self.errors, *self.warnings, *self.info]

    def codes(self) -> list[str]:
        return [issue.code for issue in self.issues]

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ContrastResult(BaseModel):
    """WCAG contrast of two colors."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    color1: str
    color2: str
    ratio: float
    passes_aa: bool = Field(alias="passesAA")
    passes_aa_large: bool = Field(alias="passesAALarge")
    passes_aaa: bool = Field(alias="passesAAA")
    passes_aaa_large: bool = Field(alias="passesAAALarge")
