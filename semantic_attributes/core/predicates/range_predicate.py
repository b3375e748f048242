from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from semantic_attributes.core.predicates.number_predicate import Number, NumberPredicate
from semantic_attributes.exceptions.predicate_exceptions import (
    PredicateConfigurationException,
    UndeterminedRangeException,
)
from semantic_attributes.utils.option_utils import Option


@dataclass(frozen=True)
class Interval:
    """A numeric interval from `first` to `last`, excluding `last` when `exclude_end` is set."""

    first: Number
    last: Number
    exclude_end: bool = False

    def __contains__(self, value: Any) -> bool:
        if value < self.first:
            return False
        return value < self.last if self.exclude_end else value <= self.last


def to_interval(value: Any) -> Any:
    """Accept `Interval`, a step-1 `range` (end excluded) or a `(first, last)` pair (end included)."""
    if isinstance(value, range):
        if value.step != 1:
            raise PredicateConfigurationException(
                f"Invalid value for option `range`: {value!r} (only a step of 1 is supported)",
                option="range",
                value=value,
            )
        return Interval(value.start, value.stop, exclude_end=True)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Interval(value[0], value[1])
    return value


class RangePredicate(NumberPredicate):
    """
    Lets you declare a range for a numeric value.

    Options:
        above      Lower bound, when the range has just a min.
        below      Upper bound, when the range has just a max.
        range      Both bounds: an `Interval`, a `range()` or a `(first, last)` pair.
                   Takes precedence over `above` and `below`.
        inclusive  Whether `above`/`below` include the bound itself (default: False).
                   A `range` carries its own inclusion.

    With no bound configured every number passes.
    """

    option_names = {
        "above": "above",
        "below": "below",
        "range": "range",
        "inclusive": "inclusive",
    }

    above = Option(Optional[Number], None)
    below = Option(Optional[Number], None)
    range = Option(Optional[Interval], None, converter=to_interval)
    inclusive = Option(bool, False)

    @property
    def default_error_message(self) -> str:
        return f"must be {self.range_description}."

    @property
    def error_binds(self) -> dict[str, Any]:
        binds: dict[str, Any] = {}
        if self.range is not None:
            binds.update(first=self.range.first, last=self.range.last)
        if self.above is not None:
            binds["above"] = self.above
        if self.below is not None:
            binds["below"] = self.below
        if binds:
            binds["description"] = self.range_description
        return binds

    @property
    def range_description(self) -> str:
        if self.range is not None:
            joiner = "to" if self.range.exclude_end else "through"
            return f"a number from {self.range.first} {joiner} {self.range.last}"
        if self.inclusive:
            if self.above is not None:
                return f"at least {self.above}"
            if self.below is not None:
                return f"no more than {self.below}"
        else:
            if self.above is not None:
                return f"more than {self.above}"
            if self.below is not None:
                return f"less than {self.below}"
        raise UndeterminedRangeException(self.attribute)

    def validate(self, value: Any, record: Any) -> bool:
        if not super().validate(value, record):
            return False

        number = self.coerce(value)
        if self.range is not None:
            return number in self.range
        if self.above is not None:
            return number >= self.above if self.inclusive else number > self.above
        if self.below is not None:
            return number <= self.below if self.inclusive else number < self.below
        return True
