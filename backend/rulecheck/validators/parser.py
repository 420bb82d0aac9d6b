"""Rule metadata parser — annotation string → rule map.

Grammar:
    annotation := token ("," token)*
    token      := name | name "=" value

The value is everything after the first "=". There is no escaping, so
values can contain "=" but never ",".
"""

import re
from typing import Optional

TOKEN_SEPARATOR = ","
ARGUMENT_SEPARATOR = "="

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_rules(annotation: str) -> dict[str, str]:
    """Parse an annotation like ``"required,min=18,max=100"``.

    Flag rules map to an empty string. A repeated rule name keeps the last
    value. Malformed tokens are kept under whatever name they produce (an
    empty token yields the empty name) and never match a known rule.
    """
    rules: dict[str, str] = {}
    for token in annotation.split(TOKEN_SEPARATOR):
        name, _, argument = token.partition(ARGUMENT_SEPARATOR)
        rules[name] = argument
    return rules


def parse_int_argument(argument: str) -> Optional[int]:
    """Parse a numeric rule argument, or return None if it is not a plain integer."""
    if not _INT_PATTERN.fullmatch(argument):
        return None
    return int(argument)


def int_argument(argument: str) -> int:
    """Lenient integer parse: anything unparsable counts as 0."""
    parsed = parse_int_argument(argument)
    return 0 if parsed is None else parsed
