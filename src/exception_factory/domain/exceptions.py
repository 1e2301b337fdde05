"""
Domain exceptions for exception-factory.

Follows the "Fail Fast" principle: misuse is reported synchronously at the
call site and nothing is logged on the way out.
All library errors inherit from ExceptionFactoryError.
"""

from typing import Any, Optional

from exception_factory.domain.enums import ConstructionFailure


class ExceptionFactoryError(Exception):
    """Base class for all exception-factory exceptions."""

    def __init__(self, message: Optional[str] = None, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class IllegalArgumentError(ExceptionFactoryError, ValueError):
    """Raised when a caller passes an absent or unusable argument."""

    pass


class UnsupportedTypeError(IllegalArgumentError):
    """Raised when a type cannot be built from a (message, cause) pair."""

    pass


class IllegalStateError(ExceptionFactoryError, RuntimeError):
    """Signals that an object is not in a state that permits the operation."""

    pass


class FactoryNotFoundError(ExceptionFactoryError, LookupError):
    """Raised when no (message, cause) factory can be resolved for a type."""

    pass


class ConstructionError(ExceptionFactoryError, RuntimeError):
    """
    Fatal failure while instantiating the target exception in build().

    The original failure is always chained as ``__cause__``.
    """

    def __init__(self, failure: ConstructionFailure, exception_class: Any = None):
        self.failure = failure
        self.exception_class = exception_class
        super().__init__(
            failure.value,
            context={"exception_class": getattr(exception_class, "__qualname__", repr(exception_class))},
        )
