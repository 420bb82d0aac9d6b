"""
Shared fixtures for the rulecheck test suite.

- unit/: pure validator tests, no I/O
- integration/: HTTP layer and demo entry point
"""

from __future__ import annotations

import pytest

from rulecheck.models.requests import Avenger
from rulecheck.validators import ValidationEngine


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine(strict=False)


@pytest.fixture
def strict_engine() -> ValidationEngine:
    return ValidationEngine(strict=True)


@pytest.fixture
def steve_rogers() -> Avenger:
    return Avenger(
        name="Steve Rogers",
        age=105,
        email="steve.rogers@avengers.com",
        rank="Captain",
        missions=10,
    )
