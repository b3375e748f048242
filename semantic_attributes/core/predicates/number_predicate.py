from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Optional, Union

from semantic_attributes.contracts.predicate import MessageKey, Predicate
from semantic_attributes.utils.option_utils import Option
from semantic_attributes.utils.serialisation import humanize_number

Number = Union[int, float, Decimal]

_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> Optional[Number]:
    """Parse human input such as ` 1,234 ` or `1_000.5`. Returns None when it is not a number."""
    cleaned = text.strip().replace(",", "").replace("_", "")
    if not _NUMBER_PATTERN.fullmatch(cleaned):
        return None
    if any(c in cleaned for c in ".eE"):
        number = float(cleaned)
        return number if math.isfinite(number) else None
    return int(cleaned)


class NumberPredicate(Predicate):
    """
    Validates that a value is a number.

    Options:
        integer  Only accept integral numbers (default: False).

    Strings are accepted when they read as a number, so both `normalize`d and
    raw form input validate the same way.
    """

    option_names = {
        "integer": "integer",
    }

    integer = Option(bool, False)

    @property
    def default_error_message(self) -> str:
        return MessageKey("not_an_integer" if self.integer else "not_a_number")

    def coerce(self, value: Any) -> Optional[Number]:
        """The numeric reading of `value`, or None."""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return value if math.isfinite(value) else None
        if isinstance(value, Decimal):
            return value if value.is_finite() else None
        if isinstance(value, str):
            return parse_number(value)
        return None

    def validate(self, value: Any, record: Any) -> bool:
        number = self.coerce(value)
        if number is None:
            return False
        if self.integer and number != int(number):
            return False
        return True

    def normalize(self, value: Any) -> Any:
        if isinstance(value, str):
            number = parse_number(value)
            if number is not None:
                return number
        return value

    def to_human(self, value: Any) -> Any:
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return humanize_number(value)
        return value
