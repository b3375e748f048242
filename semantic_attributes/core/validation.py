"""
Helpers for hosts that run predicates against a record.

The host decides when a record is validated; these helpers apply the gating
every predicate declares (`validate_on`, `or_empty`, `validate_if`) and
collect the resulting error messages per attribute.

Usage:
    predicates = [RangePredicate("age", {"above": 17}), UrlPredicate("homepage")]

    normalize_record(user, predicates)
    errors = validate_record(user, predicates, phase="create")
    # {'age': ['must be more than 17.']}
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, Union

from semantic_attributes.contracts.predicate import Predicate, ValidationPhase
from semantic_attributes.exceptions.common_exceptions import ValidationRuleException


def read_attribute(record: Any, attribute: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(attribute)
    return getattr(record, attribute, None)


def write_attribute(record: Any, attribute: str, value: Any) -> None:
    if isinstance(record, MutableMapping):
        record[attribute] = value
    else:
        setattr(record, attribute, value)


def should_validate(predicate: Predicate, record: Any, value: Any,
                    phase: Union[ValidationPhase, str] = ValidationPhase.BOTH) -> bool:
    """Whether `predicate` has to run for this value, record and lifecycle phase."""
    if not predicate.applies_to_phase(phase):
        return False
    if predicate.allow_empty and predicate.is_empty(value):
        return False
    return predicate.condition_met(record)


def normalize_record(record: Any, predicates: Iterable[Predicate]) -> Any:
    """Store the normalized form of every validated attribute back on the record."""
    for predicate in predicates:
        value = read_attribute(record, predicate.attribute)
        write_attribute(record, predicate.attribute, predicate.normalize(value))
    return record


def validate_record(record: Any, predicates: Iterable[Predicate], *,
                    phase: Union[ValidationPhase, str] = ValidationPhase.BOTH) -> dict[str, list[str]]:
    """
    Run predicates against a record.

    Values are normalized before validation but not written back; see
    `normalize_record` for that.

    Returns:
        Error messages per attribute. Empty when the record is valid.
    """
    phase = ValidationPhase(phase)
    errors: dict[str, list[str]] = {}

    for predicate in predicates:
        value = predicate.normalize(read_attribute(record, predicate.attribute))

        if not should_validate(predicate, record, value, phase):
            logging.debug(f"[VALIDATION] Skipping {predicate!r} on {phase.value}")
            continue

        if not predicate.validate(value, record):
            message = predicate.error
            logging.debug(f"[VALIDATION] {predicate!r} failed for {value!r}: {message}")
            errors.setdefault(predicate.attribute, []).append(message)

    return errors


def validate_record_or_fail(record: Any, predicates: Iterable[Predicate], *,
                            phase: Union[ValidationPhase, str] = ValidationPhase.BOTH) -> None:
    """
    Like `validate_record`, but raise instead of returning errors.

    Raises:
        ValidationRuleException: If any predicate fails. `errors` lists every
            failure as `{"loc": (attribute,), "msg": message}`.
    """
    errors = validate_record(record, predicates, phase=phase)
    if not errors:
        return

    failures = [
        {"loc": (attribute,), "msg": message}
        for attribute, messages in errors.items()
        for message in messages
    ]
    first = failures[0]
    raise ValidationRuleException(
        f"`{first['loc'][0]}` {first['msg']}",
        loc=first["loc"],
        errors=failures,
    )
