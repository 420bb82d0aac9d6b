"""Validation Engine — walks a record's fields, checks each one, produces a report.

This is the main entry point for record validation.

Usage:
    engine = ValidationEngine()
    report = engine.validate(avenger)
    if not report.passed:
        # report.violations lists every failing field, in declaration order
"""

import time
from typing import Optional, TypeVar

import structlog

from rulecheck.config import get_settings
from rulecheck.validators.errors import RecordValidationError
from rulecheck.validators.field_validator import check_field
from rulecheck.validators.models import ValidationReport, Violation
from rulecheck.validators.records import rule_table_for

logger = structlog.get_logger()

R = TypeVar("R")


class ValidationEngine:
    """Applies annotated field rules to record instances.

    Design principles:
        - Deterministic: same record → same report
        - Collect-all across fields, first failure wins within a field
        - Stateless per call: safe to share between threads
    """

    def __init__(self, strict: Optional[bool] = None):
        """Initialize the engine.

        Args:
            strict: Reject non-integer arguments of numeric rules with
                RuleArgumentError instead of treating them as 0. If None,
                uses the STRICT_RULES setting.
        """
        self.strict = get_settings().STRICT_RULES if strict is None else strict

    def validate(self, record: object) -> ValidationReport:
        """Check every annotated field of the record.

        Args:
            record: A dataclass or pydantic model instance

        Returns:
            ValidationReport with one violation per failing field

        Raises:
            RecordTypeError: record is not a record instance
            RuleArgumentError: strict mode and a numeric rule argument is not an integer
        """
        start_time = time.perf_counter()
        record_type = type(record).__name__

        table = rule_table_for(record, self.strict)

        violations: list[Violation] = []
        for field_rules in table:
            reason = check_field(getattr(record, field_rules.name), field_rules.rules)
            if reason is None:
                continue
            logger.debug(
                "field_violation",
                record_type=record_type,
                field=field_rules.name,
                reason=reason,
            )
            violations.append(Violation(field=field_rules.name, reason=reason))

        report = ValidationReport(record_type=record_type, violations=tuple(violations))

        logger.info(
            "validation_complete",
            record_type=record_type,
            passed=report.passed,
            fields_checked=len(table),
            total_errors=report.error_count,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return report

    def ensure_valid(self, record: R) -> R:
        """Return the record unchanged, or raise RecordValidationError carrying the report."""
        report = self.validate(record)
        if not report.passed:
            raise RecordValidationError(report)
        return record


# Module-level singleton
validation_engine = ValidationEngine()


def validate(record: object) -> ValidationReport:
    """Validate with the shared default engine."""
    return validation_engine.validate(record)
