"""Exception hierarchy for the validation engine.

Field violations are data (see models.ValidationReport), not exceptions.
Only engine misuse and the explicit ensure_valid() path raise.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from rulecheck.validators.models import ValidationReport


class RuleCheckError(Exception):
    """Base class for every error raised by rulecheck."""


class ConfigurationError(RuleCheckError):
    """The engine was called in a way that can never produce a report."""


class RecordTypeError(ConfigurationError):
    """Raised when validate() receives something that is not a record instance."""

    def __init__(self, value: object):
        self.value_type = type(value).__name__
        super().__init__(f"input must be a record, got {self.value_type}")


class RuleArgumentError(ConfigurationError):
    """A numeric rule argument could not be parsed (strict mode only)."""

    def __init__(
        self,
        rule: str,
        argument: str,
        field: Optional[str] = None,
        record_type: Optional[str] = None,
    ):
        self.rule = rule
        self.argument = argument
        self.field = field
        self.record_type = record_type
        location = ".".join(part for part in (record_type, field) if part)
        prefix = f"{location}: " if location else ""
        super().__init__(
            f"{prefix}rule '{rule}' expects an integer argument, got {argument!r}"
        )


class RecordValidationError(RuleCheckError):
    """Raised by ensure_valid() when a record has at least one violation."""

    def __init__(self, report: "ValidationReport"):
        self.report = report
        super().__init__(report.message)
