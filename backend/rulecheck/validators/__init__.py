"""Record validator — declarative, annotation-driven field validation.

Usage:
    from rulecheck.validators import validate

    report = validate(avenger)
    if not report.passed:
        print(report.message)
"""

from rulecheck.validators.engine import ValidationEngine, validate, validation_engine
from rulecheck.validators.errors import (
    ConfigurationError,
    RecordTypeError,
    RecordValidationError,
    RuleArgumentError,
    RuleCheckError,
)
from rulecheck.validators.field_validator import check_field
from rulecheck.validators.models import ValidationReport, ValueKind, Violation
from rulecheck.validators.parser import parse_rules
from rulecheck.validators.records import build_rule_table, is_record, rule_field, rules

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate",
    "ValidationReport",
    "Violation",
    "ValueKind",
    "parse_rules",
    "check_field",
    "build_rule_table",
    "is_record",
    "rules",
    "rule_field",
    "RuleCheckError",
    "ConfigurationError",
    "RecordTypeError",
    "RuleArgumentError",
    "RecordValidationError",
]
