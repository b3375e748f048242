from __future__ import annotations

import inspect
import logging
from enum import Enum
from typing import Any, Callable, ClassVar, Mapping, Optional, Union

from semantic_attributes.config import ERROR_MESSAGES_SCOPE
from semantic_attributes.core.localization import translate_error
from semantic_attributes.exceptions.predicate_exceptions import (
    PredicateConfigurationException,
    UnimplementedPredicateException,
    UnknownOptionException,
)
from semantic_attributes.utils.option_utils import Option, is_empty

Translator = Callable[[str, str, dict[str, Any]], str]


class MessageKey(str):
    """A symbolic error message, resolved through the translator instead of being shown as is."""

    def __repr__(self) -> str:
        return f"MessageKey({str.__repr__(self)})"


class ValidationPhase(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    BOTH = "both"


class Predicate:
    """
    Base class for all predicates. Defines the interface and the standard options.

    A predicate is one validation rule bound to one attribute. It is built once
    per rule declaration and then reused for every record, so `validate`,
    `normalize` and `to_human` only read configuration.

    Options shared by every predicate:

        error_message (message)  Feedback for the user if validation fails. A plain
                                 string is used as is, a `MessageKey` is looked up.
        full_message             A final message; wins over `error_message`.
        validate_if (if)         Restricts when validation happens. Either a callable
                                 taking the record, or the name of a method on the record.
        validate_on (on)         When to validate: "create", "update" or "both" (default).
        or_empty                 Whether empty/None values skip validation (default: True).
        translator               Lookup used for `MessageKey` messages,
                                 `(key, scope, binds) -> str`.

    Usage:
        predicate = RangePredicate("age", {"above": 17, "if": "is_adult_only"})
        predicate.validate(21, record)
    """

    # option name -> attribute name; merged along the class hierarchy
    option_names: ClassVar[dict[str, str]] = {
        "error_message": "error_message",
        "message": "error_message",
        "full_message": "full_message",
        "validate_if": "validate_if",
        "if": "validate_if",
        "validate_on": "validate_on",
        "on": "validate_on",
        "or_empty": "allow_empty",
        "translator": "translator",
    }
    _options: ClassVar[dict[str, str]]
    _option_descriptors: ClassVar[list[Option]]

    full_message = Option(Optional[str], None)
    validate_if = Option(Optional[Union[str, Callable[..., Any]]], None)
    validate_on = Option(ValidationPhase, ValidationPhase.BOTH)
    allow_empty = Option(bool, True)
    translator = Option(Optional[Callable[..., str]], None)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._register_options()

    @classmethod
    def _register_options(cls) -> None:
        options: dict[str, str] = {}
        descriptors: dict[str, Option] = {}
        for base in reversed(cls.__mro__):
            options.update(vars(base).get("option_names", {}))
            descriptors.update({name: attr for name, attr in vars(base).items() if isinstance(attr, Option)})

        for option, attribute in options.items():
            target = inspect.getattr_static(cls, attribute, None)
            settable = isinstance(target, Option) or (isinstance(target, property) and target.fset is not None)
            if not settable:
                raise PredicateConfigurationException(
                    f"[{cls.__name__}] Option `{option}` points at `{attribute}`, which is not a settable option",
                    option=option,
                )

        cls._options = options
        cls._option_descriptors = list(descriptors.values())

    def __init__(self, attribute: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        self._attribute = attribute
        self._error_message: Optional[str] = None
        for descriptor in self._option_descriptors:
            descriptor.install_default(self)

        for option, value in {**(options or {}), **kwargs}.items():
            self.set_option(option, value)

        logging.debug(f"[PREDICATE] Configured {self!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attribute!r})"

    @property
    def attribute(self) -> str:
        return self._attribute

    @classmethod
    def known_options(cls) -> list[str]:
        return list(cls._options)

    def set_option(self, option: str, value: Any) -> None:
        """Apply one option by name (aliases included)."""
        attribute = self._options.get(option)
        if attribute is None:
            raise UnknownOptionException(type(self).__name__, option, self.known_options())
        setattr(self, attribute, value)

    ##
    ## Error reporting
    ##

    @property
    def error_message(self) -> str:
        if self._error_message is not None:
            return self._error_message
        return self.default_error_message

    @error_message.setter
    def error_message(self, value: Optional[str]) -> None:
        if value is not None and not isinstance(value, str):
            raise PredicateConfigurationException(
                f"Invalid value for option `error_message`: {value!r} (expected a string or MessageKey)",
                option="error_message",
                value=value,
            )
        self._error_message = value

    @property
    def default_error_message(self) -> str:
        return MessageKey("invalid")

    @property
    def error_binds(self) -> dict[str, Any]:
        """Interpolation variables available to symbolic error messages."""
        return {}

    @property
    def error(self) -> str:
        if self.full_message:
            return self.full_message

        message = self.error_message
        if isinstance(message, MessageKey):
            translator = self.translator or translate_error
            return translator(str(message), ERROR_MESSAGES_SCOPE, self.error_binds)
        return message

    ##
    ## Gating
    ##

    def applies_to_phase(self, phase: Union[ValidationPhase, str]) -> bool:
        phase = ValidationPhase(phase)
        return ValidationPhase.BOTH in (self.validate_on, phase) or self.validate_on == phase

    def condition_met(self, record: Any) -> bool:
        """Evaluate `validate_if` against the record. No condition means validate."""
        condition = self.validate_if
        if condition is None:
            return True
        if isinstance(condition, str):
            method = getattr(record, condition, None)
            if not callable(method):
                raise PredicateConfigurationException(
                    f"`validate_if` names `{condition}`, which {type(record).__name__} does not define",
                    option="validate_if",
                    value=condition,
                )
            return bool(method())
        return bool(condition(record))

    def is_empty(self, value: Any) -> bool:
        return is_empty(value)

    ##
    ## Extension points
    ##

    def validate(self, value: Any, record: Any) -> bool:
        """Return True when `value` satisfies the rule. Concrete predicates must override this."""
        raise UnimplementedPredicateException(type(self).__name__)

    def normalize(self, value: Any) -> Any:
        """Turn human input into its canonical form. Be forgiving of formatting variations."""
        return value

    def to_human(self, value: Any) -> Any:
        """Render a stored value the way people like to read it."""
        return value


Predicate._register_options()
