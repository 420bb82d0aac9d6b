"""Validation models — value kinds, violations, and report structure.

All validation is deterministic: same record → same report.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ValueKind(str, Enum):
    """Semantic kind of a field value. Decides which rules apply."""

    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BOOLEAN = "boolean"
    OTHER = "other"

    @classmethod
    def of(cls, value: object) -> "ValueKind":
        # bool is a subclass of int, so it must be tested first
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.TEXT
        return cls.OTHER


class Violation(BaseModel):
    """A single failed rule on one field."""

    model_config = ConfigDict(frozen=True)

    field: str
    reason: str

    def __str__(self) -> str:
        return f"Field {self.field}: {self.reason}"


class ValidationReport(BaseModel):
    """Ordered violations of one record — the output of the validation engine."""

    model_config = ConfigDict(frozen=True)

    record_type: str = Field(default="", description="Class name of the validated record")
    violations: tuple[Violation, ...] = Field(
        default=(),
        description="At most one violation per field, in field declaration order",
    )

    @property
    def passed(self) -> bool:
        return not self.violations

    @property
    def error_count(self) -> int:
        return len(self.violations)

    @property
    def message(self) -> str:
        if self.passed:
            return "validation passed"
        return "validation errors: [" + " ".join(str(v) for v in self.violations) + "]"

    def by_field(self) -> dict[str, str]:
        """Map field name → reason."""
        return {v.field: v.reason for v in self.violations}

    def reason_for(self, field: str) -> Optional[str]:
        for violation in self.violations:
            if violation.field == field:
                return violation.reason
        return None

    def __str__(self) -> str:
        return self.message
