"""Domain error classes.

Protocol-agnostic errors that represent catalog failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains error information that can be translated to any
    transport format by the host.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, keys)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Input validation error raised at the host boundary.

    Examples:
        - Blank author or genre key in filter criteria
        - Page size smaller than one
        - Unknown theme name

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "author", "message": "Must not be blank"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class FilterValidationError(ValidationError):
    """Raised when filter criteria are invalid."""

    pass


class PagingValidationError(ValidationError):
    """Raised when pagination parameters are invalid."""

    pass


class NotFoundError(DomainError):
    """Resource not found.

    The catalog core reports a missed lookup as ``None``; hosts raise this
    error when they need to surface the miss (e.g. as an HTTP 404).

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Book")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class MalformedRecordError(DomainError):
    """A raw catalog record is structurally invalid.

    Fatal to catalog loading: the host should abort initialization.

    Examples:
        - Record without id, title or author
        - Duplicate record id
        - Unparseable publication timestamp

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "MALFORMED_RECORD"

    def __init__(self, message: str, index: int | None = None, **context: Any) -> None:
        """Create a malformed record error.

        Args:
            message: Description of the structural problem
            index: Position of the offending record in the raw input, if known
            **context: Additional context (e.g. missing field name)
        """
        super().__init__(message, index=index, **context)


class UnknownKeyError(DomainError):
    """A reference key has no entry in its lookup table.

    Indicates corrupt input data. Hosts may recover by treating the
    display name as empty.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "UNKNOWN_KEY"

    def __init__(self, table: str, key: str, **context: Any) -> None:
        super().__init__(f"Unknown {table} key '{key}'", table=table, key=key, **context)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
