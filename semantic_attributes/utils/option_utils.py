from collections.abc import Sized
from functools import lru_cache
from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError

from semantic_attributes.exceptions.predicate_exceptions import PredicateConfigurationException


@lru_cache(maxsize=None)
def _type_adapter(hint: Any) -> TypeAdapter:
    return TypeAdapter(hint)


def coerce_option(option: str, value: Any, hint: Any) -> Any:
    """
    Coerce a predicate option value to its declared type.

    Raises:
        PredicateConfigurationException: If the value does not fit the type.
    """
    try:
        return _type_adapter(hint).validate_python(value)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        raise PredicateConfigurationException(
            f"Invalid value for option `{option}`: {value!r} ({reason})",
            option=option,
            value=value,
        ) from e


def is_empty(value: Any) -> bool:
    """None, blank strings and empty collections count as empty. Numbers never do."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class Option:
    """
    A typed predicate option.

    Assigning to the attribute coerces the value to `hint` (optionally after
    `converter`), so bad values fail at configuration time rather than during
    validation. Defaults are installed per instance by `Predicate.__init__`.
    """

    def __init__(self, hint: Any, default: Any = None, *,
                 default_factory: Callable[[], Any] | None = None,
                 converter: Callable[[Any], Any] | None = None):
        self.hint = hint
        self.default = default
        self.default_factory = default_factory
        self.converter = converter
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__[self.name]

    def __set__(self, instance: Any, value: Any) -> None:
        if self.converter is not None:
            value = self.converter(value)
        instance.__dict__[self.name] = coerce_option(self.name, value, self.hint)

    def install_default(self, instance: Any) -> None:
        instance.__dict__[self.name] = self.default_factory() if self.default_factory else self.default
