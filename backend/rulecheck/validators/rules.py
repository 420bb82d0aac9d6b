"""Rule strategies — one class per recognized rule name.

Each rule is a standalone, independently testable unit. The field validator
runs them in RULE_CHAIN order and stops at the first failure.
"""

from abc import ABC, abstractmethod
import re
from typing import Optional

from rulecheck.validators.models import ValueKind
from rulecheck.validators.parser import int_argument

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_zero(value: object, kind: ValueKind) -> bool:
    """Zero/empty value per semantic kind."""
    if kind is ValueKind.INTEGER:
        return value == 0
    if kind is ValueKind.FLOAT:
        return value == 0.0
    if kind is ValueKind.TEXT:
        return value == ""
    if kind is ValueKind.BOOLEAN:
        return value is False
    if value is None:
        return True
    try:
        return len(value) == 0  # type: ignore[arg-type]
    except TypeError:
        return False


class BaseRule(ABC):
    """Abstract base for all field rules.

    Contract:
        - check() is only called when the value's kind is in `kinds`
        - check() returns a reason string on failure, None on success
        - No I/O, no randomness
    """

    # Kinds this rule applies to. None means every kind.
    kinds: Optional[frozenset[ValueKind]] = None

    # True when the argument must be an integer (checked in strict mode).
    numeric_argument: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule key as written in annotations."""
        ...

    @abstractmethod
    def check(self, value, argument: str, kind: ValueKind) -> Optional[str]:
        ...

    def applies_to(self, kind: ValueKind) -> bool:
        return self.kinds is None or kind in self.kinds


class RequiredRule(BaseRule):
    """Value must not be the zero value of its kind. The argument is ignored."""

    @property
    def name(self) -> str:
        return "required"

    def check(self, value, argument: str, kind: ValueKind) -> Optional[str]:
        if is_zero(value, kind):
            return "is required"
        return None


class MinRule(BaseRule):
    kinds = frozenset({ValueKind.INTEGER})
    numeric_argument = True

    @property
    def name(self) -> str:
        return "min"

    def check(self, value, argument: str, kind: ValueKind) -> Optional[str]:
        if value < int_argument(argument):
            return f"must be >= {argument}"
        return None


class MaxRule(BaseRule):
    kinds = frozenset({ValueKind.INTEGER})
    numeric_argument = True

    @property
    def name(self) -> str:
        return "max"

    def check(self, value, argument: str, kind: ValueKind) -> Optional[str]:
        if value > int_argument(argument):
            return f"must be <= {argument}"
        return None


class MinLenRule(BaseRule):
    kinds = frozenset({ValueKind.TEXT})
    numeric_argument = True

    @property
    def name(self) -> str:
        return "minLen"

    def check(self, value, argument: str, kind: ValueKind) -> Optional[str]:
        if len(value) < int_argument(argument):
            return f"length must be >= {argument}"
        return None


class MaxLenRule(BaseRule):
    kinds = frozenset({ValueKind.TEXT})
    numeric_argument = True

    @property
    def name(self) -> str:
        return "maxLen"

    def check(self, value, argument: str, kind: ValueKind) -> Optional[str]:
        if len(value) > int_argument(argument):
            return f"length must be <= {argument}"
        return None


class EmailRule(BaseRule):
    """Syntactic approximation only. No DNS or mailbox checks."""

    kinds = frozenset({ValueKind.TEXT})

    @property
    def name(self) -> str:
        return "email"

    def check(self, value, argument: str, kind: ValueKind) -> Optional[str]:
        if not EMAIL_PATTERN.fullmatch(value):
            return "must be a valid email"
        return None


# Priority order. The first failing rule is the field's only violation.
RULE_CHAIN: tuple[BaseRule, ...] = (
    RequiredRule(),
    MinRule(),
    MaxRule(),
    MinLenRule(),
    MaxLenRule(),
    EmailRule(),
)

NUMERIC_RULES = frozenset(rule.name for rule in RULE_CHAIN if rule.numeric_argument)
