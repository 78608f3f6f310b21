"""Validation findings and the corpus-wide report built at load time."""
from collections import Counter
from typing import Literal, Optional

from pydantic import BaseModel, Field


Severity = Literal["error", "warning"]


class Finding(BaseModel):
    """One detected structural issue in the content corpus."""
    severity: Severity
    code: str  # e.g. "duplicate-phase-id", "orphaned-code-fence"
    message: str
    phase_id: Optional[str] = None
    topic_id: Optional[str] = None
    modules: list[str] = Field(default_factory=list)  # offending module keys


class ValidationReport(BaseModel):
    """Every finding from one validation pass, split by severity."""
    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, finding: Finding) -> None:
        if finding.severity == "error":
            self.errors.append(finding)
        else:
            self.warnings.append(finding)

    def merge(self, other: "ValidationReport") -> "ValidationReport":
        """Return a new report holding this report's findings followed by other's."""
        return ValidationReport(
            errors=[*self.errors, *other.errors],
            warnings=[*self.warnings, *other.warnings],
        )

    def findings(self) -> list[Finding]:
        return [*self.errors, *self.warnings]

    def summary(self) -> dict[str, int]:
        """Count findings by code."""
        return dict(Counter(f.code for f in self.findings()))
