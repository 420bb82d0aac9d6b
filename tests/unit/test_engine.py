"""Tests for the validation engine: field walking, aggregation, error classes."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel

from rulecheck.models.requests import Avenger, Profile
from rulecheck.validators import (
    ConfigurationError,
    RecordTypeError,
    RecordValidationError,
    RuleArgumentError,
    ValidationEngine,
    ValidationReport,
    Violation,
    rule_field,
    rules,
    validate,
)


@dataclass
class Plain:
    title: str = ""
    count: int = 0


@dataclass
class Account:
    username: str = rules("required,minLen=3,maxLen=12", default="")
    nickname: str = ""
    age: int = rules("min=18,max=120", default=0)
    contact: str = rules("email", default="")
    balance: float = rules("required", default=0.0)
    active: bool = rules("required", default=False)
    tags: list = rules("required", default_factory=list)
    notes: str = field(default="", metadata={"validate": ""})


class Signup(BaseModel):
    email: str = rule_field("required,email", default="")
    password: str = rule_field("required,minLen=8")
    referrer: str = ""
    age: int = rule_field("min=13", default=0)


@dataclass
class Misconfigured:
    score: int = rules("min=ten", default=0)
    label: str = rules("maxLen=5.5", default="")


# ============================================================================
# Success paths
# ============================================================================


class TestPassing:
    def test_record_without_annotations_passes(self, engine):
        report = engine.validate(Plain())
        assert report.passed
        assert report.violations == ()
        assert report.record_type == "Plain"

    def test_valid_account(self, engine):
        account = Account(
            username="tony",
            age=48,
            contact="tony@stark.io",
            balance=1.5,
            active=True,
            tags=["ironman"],
        )
        report = engine.validate(account)
        assert report.passed
        assert report.error_count == 0
        assert report.message == "validation passed"

    def test_pydantic_record(self, engine):
        report = engine.validate(Signup(email="a@b.co", password="hunter22", age=20))
        assert report.passed

    def test_pydantic_defaults_are_validated_too(self, engine):
        report = engine.validate(Signup(email="a@b.co", password="hunter22"))
        assert report.by_field() == {"age": "must be >= 13"}

    def test_ensure_valid_returns_record(self, engine):
        profile = Profile(name="John Doe", age=30)
        assert engine.ensure_valid(profile) is profile


# ============================================================================
# Aggregation
# ============================================================================


class TestAggregation:
    def test_steve_rogers_only_fails_age(self, engine, steve_rogers):
        report = engine.validate(steve_rogers)
        assert not report.passed
        assert report.violations == (Violation(field="age", reason="must be <= 100"),)
        assert report.message == "validation errors: [Field age: must be <= 100]"

    def test_collects_every_failing_field_in_declaration_order(self, engine):
        report = engine.validate(Account(contact="nope", tags=[]))
        assert [v.field for v in report.violations] == [
            "username",
            "age",
            "contact",
            "balance",
            "active",
            "tags",
        ]
        assert report.by_field() == {
            "username": "is required",
            "age": "must be >= 18",
            "contact": "must be a valid email",
            "balance": "is required",
            "active": "is required",
            "tags": "is required",
        }

    def test_one_violation_per_field(self, engine):
        avenger = Avenger(name="", age=0, email="", rank="x" * 21, missions=0)
        report = engine.validate(avenger)
        assert report.by_field() == {
            "name": "is required",
            "age": "is required",
            "email": "is required",
            "rank": "length must be <= 20",
            "missions": "must be >= 1",
        }
        assert report.error_count == 5

    def test_pydantic_field_order(self, engine):
        report = engine.validate(Signup(email="bad", password="short", age=12))
        assert [str(v) for v in report.violations] == [
            "Field email: must be a valid email",
            "Field password: length must be >= 8",
            "Field age: must be >= 13",
        ]

    def test_reason_for(self, engine, steve_rogers):
        report = engine.validate(steve_rogers)
        assert report.reason_for("age") == "must be <= 100"
        assert report.reason_for("name") is None

    def test_module_level_validate(self, steve_rogers):
        assert validate(steve_rogers).by_field() == {"age": "must be <= 100"}

    def test_report_is_deterministic(self, engine, steve_rogers):
        assert engine.validate(steve_rogers) == engine.validate(steve_rogers)

    def test_ensure_valid_raises_with_report(self, engine, steve_rogers):
        with pytest.raises(RecordValidationError) as exc_info:
            engine.ensure_valid(steve_rogers)
        assert exc_info.value.report.by_field() == {"age": "must be <= 100"}
        assert str(exc_info.value) == "validation errors: [Field age: must be <= 100]"


# ============================================================================
# Configuration errors
# ============================================================================


class TestConfigurationErrors:
    @pytest.mark.parametrize(
        "value",
        [{"name": "Steve"}, 42, "Avenger", None, Avenger, Profile, [Plain()]],
    )
    def test_non_record_input(self, engine, value):
        with pytest.raises(RecordTypeError, match="input must be a record"):
            engine.validate(value)

    def test_record_type_error_is_configuration_error(self, engine):
        with pytest.raises(ConfigurationError):
            engine.validate(3.14)

    def test_lenient_mode_treats_bad_arguments_as_zero(self, engine):
        report = engine.validate(Misconfigured(score=-1, label="abc"))
        assert report.by_field() == {
            "score": "must be >= ten",
            "label": "length must be <= 5.5",
        }

    def test_strict_mode_rejects_bad_arguments(self, strict_engine):
        with pytest.raises(RuleArgumentError) as exc_info:
            strict_engine.validate(Misconfigured(score=50))
        err = exc_info.value
        assert (err.record_type, err.field, err.rule, err.argument) == (
            "Misconfigured",
            "score",
            "min",
            "ten",
        )
        assert str(err) == "Misconfigured.score: rule 'min' expects an integer argument, got 'ten'"

    def test_strict_mode_accepts_clean_records(self, strict_engine, steve_rogers):
        assert strict_engine.validate(steve_rogers).by_field() == {"age": "must be <= 100"}

    def test_violation_is_immutable(self):
        violation = Violation(field="age", reason="must be <= 100")
        with pytest.raises(Exception):
            violation.reason = "changed"

    def test_empty_report(self):
        report = ValidationReport()
        assert report.passed
        assert report.by_field() == {}
