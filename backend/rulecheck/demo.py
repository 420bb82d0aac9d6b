"""Validate the example Avenger record and print the outcome."""

import sys

from rulecheck.log import configure_logging
from rulecheck.models.requests import Avenger
from rulecheck.validators import validate


def main() -> int:
    # stdout carries only the outcome line
    configure_logging("warning")

    avenger = Avenger(
        name="Steve Rogers",
        age=105,
        email="steve.rogers@avengers.com",
        rank="Captain",
        missions=10,
    )

    report = validate(avenger)
    if not report.passed:
        print("Validation failed:", report.message)
        return 1

    print("Validation successful!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
