"""Field validator — applies one field's rule map to its runtime value."""

from typing import Mapping, Optional

from rulecheck.validators.errors import RuleArgumentError
from rulecheck.validators.models import ValueKind
from rulecheck.validators.parser import parse_int_argument
from rulecheck.validators.rules import NUMERIC_RULES, RULE_CHAIN


def check_field(value, rules: Mapping[str, str], *, strict: bool = False) -> Optional[str]:
    """Return the reason of the first failing rule, or None if all pass.

    Rules run in RULE_CHAIN order regardless of their order in the
    annotation. Rules that do not apply to the value's kind are skipped,
    unknown rule names are ignored.

    With strict=True a numeric rule whose argument is not an integer raises
    RuleArgumentError before any rule is checked, even if the rule would
    not apply to the value's kind.
    """
    if strict:
        for rule, argument in unparsable_arguments(rules):
            raise RuleArgumentError(rule, argument)

    kind = ValueKind.of(value)
    for rule in RULE_CHAIN:
        if rule.name not in rules or not rule.applies_to(kind):
            continue
        reason = rule.check(value, rules[rule.name], kind)
        if reason is not None:
            return reason
    return None


def unparsable_arguments(rules: Mapping[str, str]) -> list[tuple[str, str]]:
    """List (rule, argument) pairs whose numeric argument is not an integer."""
    return [
        (name, argument)
        for name, argument in rules.items()
        if name in NUMERIC_RULES and parse_int_argument(argument) is None
    ]
