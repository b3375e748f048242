from typing import Optional

from semantic_attributes.utils.serialisation import get_exception_error_type


class AppException(Exception):
    def __init__(self,
        message: str,
        *,
        error_type: Optional[str] = None,
        data: Optional[dict] = None
    ):
        """
        Universal exception of the package.

        Args:
            message: The error message.
            error_type: The error type (if not provided, it will be inferred from the exception class name).
            data: Extra context about the failure.
        """
        self.message = message
        self.error_type = error_type or get_exception_error_type(self)
        self.data = data
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error_type": self.error_type, "message": self.message, "data": self.data}


class ValidationRuleException(ValueError):
    """
    Raised when a record fails one or more predicates and the caller asked for
    an exception instead of an error mapping (see `validate_record_or_fail`).

    Predicates themselves never raise this; `Predicate.validate` reports
    failure by returning False.
    """

    def __init__(
        self,
        message: str,
        *,
        loc: tuple[str, ...] | None = None,
        error_type: str = "value_error",
        errors: list[dict] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.loc = loc or tuple()
        self.error_type = error_type
        self.errors = errors


class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: str = None, supported_values: list[str] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)
