"""Record introspection — reads per-field annotations off dataclasses and pydantic models.

Annotations live in field metadata under the "validate" key:

    @dataclass
    class Avenger:
        name: str = rules("required,minLen=3,maxLen=50")

    class Profile(BaseModel):
        name: str = rule_field("required")

The rule table of a record type is built once and cached; every entry is
read-only, so the cache is safe to share between threads.
"""

import dataclasses
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from pydantic import BaseModel, Field

from rulecheck.validators.errors import RecordTypeError, RuleArgumentError
from rulecheck.validators.field_validator import unparsable_arguments
from rulecheck.validators.parser import parse_rules

VALIDATE_KEY = "validate"


@dataclasses.dataclass(frozen=True)
class FieldRules:
    """Parsed annotation of one record field."""

    name: str
    annotation: str
    rules: Mapping[str, str]


def rules(annotation: str, **kwargs: Any) -> Any:
    """dataclasses.field() carrying a rule annotation."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[VALIDATE_KEY] = annotation
    return dataclasses.field(metadata=metadata, **kwargs)


def rule_field(annotation: str, default: Any = ..., **kwargs: Any) -> Any:
    """pydantic Field() carrying a rule annotation."""
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[VALIDATE_KEY] = annotation
    return Field(default, json_schema_extra=extra, **kwargs)


def is_record(value: object) -> bool:
    """True for dataclass instances and pydantic model instances (not classes)."""
    if isinstance(value, type):
        return False
    return isinstance(value, BaseModel) or dataclasses.is_dataclass(value)


def _annotations(record_type: type) -> Iterator[tuple[str, str]]:
    """Yield (field name, annotation) in declaration order."""
    if issubclass(record_type, BaseModel):
        for name, info in record_type.model_fields.items():
            extra = info.json_schema_extra
            annotation = extra.get(VALIDATE_KEY, "") if isinstance(extra, dict) else ""
            yield name, str(annotation)
    else:
        for f in dataclasses.fields(record_type):
            yield f.name, str(f.metadata.get(VALIDATE_KEY, ""))


@lru_cache(maxsize=256)
def build_rule_table(record_type: type, strict: bool = False) -> tuple[FieldRules, ...]:
    """Parse every annotated field of a record type.

    Fields with an empty annotation are left out. In strict mode a numeric
    rule with a non-integer argument raises RuleArgumentError here, before
    any value is checked.
    """
    table = []
    for name, annotation in _annotations(record_type):
        if not annotation:
            continue
        parsed = parse_rules(annotation)
        if strict:
            for rule, argument in unparsable_arguments(parsed):
                raise RuleArgumentError(rule, argument, field=name, record_type=record_type.__name__)
        table.append(FieldRules(name=name, annotation=annotation, rules=MappingProxyType(parsed)))
    return tuple(table)


def rule_table_for(record: object, strict: bool = False) -> tuple[FieldRules, ...]:
    if not is_record(record):
        raise RecordTypeError(record)
    return build_rule_table(type(record), strict)
