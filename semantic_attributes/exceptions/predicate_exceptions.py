from typing import Any, Optional

from semantic_attributes.exceptions.common_exceptions import AppException


class PredicateException(AppException):
    def __init__(self, message: str, *, data: Optional[dict] = None):
        super().__init__(message, data=data)


class PredicateConfigurationException(PredicateException, ValueError):
    """Raised while setting up a predicate: unknown option, bad option value or a broken option allow-list."""

    def __init__(self, message: str, *, option: Optional[str] = None, value: Any = None):
        super().__init__(message, data={"option": option, "value": value} if option else None)
        self.option = option
        self.value = value


class UnknownOptionException(PredicateConfigurationException):
    def __init__(self, predicate_name: str, option: str, known_options: list[str]):
        super().__init__(
            f"[{predicate_name}] Unknown option `{option}` (supported options: {', '.join(sorted(known_options))})",
            option=option,
        )


class UnimplementedPredicateException(NotImplementedError):
    def __init__(self, predicate_name: str):
        super().__init__(f"{predicate_name} does not implement `validate`.")


class UndeterminedRangeException(PredicateException):
    def __init__(self, attribute: str):
        super().__init__(
            f"Undetermined range for `{attribute}`: set `range`, `above` or `below`.",
            data={"attribute": attribute},
        )
