"""Example records with rule annotations."""

from dataclasses import dataclass

from pydantic import BaseModel

from rulecheck.validators import rule_field, rules

# Body integers are decoded as signed 64-bit values; anything wider is a bad body.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Profile(BaseModel):
    """Body of a profile-creation request."""

    name: str = rule_field("required", default="", description="Display name")
    age: int = rule_field(
        "required,min=1",
        default=0,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Age in years",
    )


@dataclass(frozen=True)
class Avenger:
    name: str = rules("required,minLen=3,maxLen=50")
    age: int = rules("required,min=18,max=100")
    email: str = rules("required,email")
    rank: str = rules("maxLen=20")
    missions: int = rules("min=1")
