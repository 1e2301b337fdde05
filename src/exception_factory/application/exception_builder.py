"""
Generic builder of exception instances with templated messages.

Usage:
    error = (
        ExceptionBuilder.of(ValueError)
        .set_message_from_template(OneArgTemplate.MUST_NOT_BE_NULL, "username")
        .set_cause(original)
        .build()
    )

The target class is validated once, in ``of()``. Setters are last-write-wins
and reject bad input before touching state. ``build()`` can be called any
number of times; each call returns a new instance from the current state.

A builder is a plain mutable object: do not share one across threads
without external locking.
"""

import inspect
import re
from typing import Callable, Generic, Optional, Tuple, Type, TypeVar, Union

from exception_factory.application.capabilities import resolve_factory, supports_message_and_cause
from exception_factory.domain.enums import ConstructionFailure
from exception_factory.domain.exceptions import (
    ConstructionError,
    FactoryNotFoundError,
    IllegalArgumentError,
    UnsupportedTypeError,
)
from exception_factory.domain.message_templates import OneArgTemplate, TwoArgTemplate
from exception_factory.infrastructure.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=BaseException)

MessageTemplate = Union[OneArgTemplate, TwoArgTemplate]

# One %-conversion: optional (key), flags, width, precision, length modifier, type.
_CONVERSION = re.compile(r"%(\([^)]*\))?[#0 +-]*(\*|\d+)?(?:\.(\*|\d+))?[hlL]?([diouxXeEfFgGcrsa%])")


def _used_args(formatted_string: str, message_args: Tuple) -> Tuple:
    """Drop trailing arguments that ``formatted_string`` has no conversion for."""
    needed = 0
    for match in _CONVERSION.finditer(formatted_string):
        key, width, precision, conversion = match.groups()
        if key is not None:
            return message_args
        if conversion == "%":
            continue
        needed += 1 + (width == "*") + (precision == "*")
    return message_args[:needed]


class ExceptionBuilder(Generic[E]):
    """Accumulates a message and a cause, then builds an ``E``."""

    def __init__(self, exception_class: Type[E]):
        # Use ExceptionBuilder.of(); it performs the capability check.
        self._exception_class = exception_class
        self._message: Optional[str] = None
        self._cause: Optional[BaseException] = None

    @classmethod
    def of(cls, exception_class: Type[E]) -> "ExceptionBuilder[E]":
        """
        Create a builder for ``exception_class``.

        Raises:
            IllegalArgumentError: if ``exception_class`` is None
            UnsupportedTypeError: if the class cannot be built from (message, cause)
        """
        if exception_class is None:
            raise IllegalArgumentError("`exceptionClass` is `null`")
        if not supports_message_and_cause(exception_class):
            raise UnsupportedTypeError(
                "`exceptionClass` does NOT have a (`String, Throwable`) constructor",
                context={"exception_class": repr(exception_class)},
            )
        return cls(exception_class)

    @property
    def exception_class(self) -> Type[E]:
        return self._exception_class

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    def set_message(self, message: Optional[str]) -> "ExceptionBuilder[E]":
        """Use ``message`` verbatim; None and "" are both allowed."""
        self._message = message
        return self

    def set_message_from_transform(
        self, message_builder: Callable[..., str], *message_args: Optional[str]
    ) -> "ExceptionBuilder[E]":
        """
        Use ``message_builder(*message_args)`` as the message.

        ``message_builder`` is a unary or binary string transform, e.g.
        ``"this is a %s".__mod__`` or a template's ``format``.
        """
        if message_builder is None:
            raise IllegalArgumentError("`messageBuilder` MUST NOT be `null`")
        self._message = message_builder(*message_args)
        return self

    def set_message_formatted(
        self, formatted_string: str, *message_args: Optional[str]
    ) -> "ExceptionBuilder[E]":
        """
        Use ``formatted_string % message_args`` as the message.

        Arguments beyond the ones the format string consumes are ignored.
        Too few arguments, or a malformed format string, raise the usual
        TypeError/ValueError from %-formatting and keep the previous message.
        """
        if formatted_string is None:
            raise IllegalArgumentError("`formattedString` MUST NOT be `null`")
        self._message = formatted_string % _used_args(formatted_string, message_args)
        return self

    def set_message_from_template(
        self, message_template: MessageTemplate, *message_args: Optional[str]
    ) -> "ExceptionBuilder[E]":
        """Render a catalog template; one value for OneArgTemplate, two for TwoArgTemplate."""
        if message_template is None:
            raise IllegalArgumentError("`messageTemplate` MUST NOT be `null`")
        self._message = message_template.format(*message_args)
        return self

    def set_cause(self, cause: Optional[BaseException]) -> "ExceptionBuilder[E]":
        if cause is not None and not isinstance(cause, BaseException):
            raise IllegalArgumentError(TwoArgTemplate.MUST_BE_INSTANCE_OF.format("cause", "BaseException"))
        self._cause = cause
        return self

    def build(self) -> E:
        """
        Instantiate the target class from the held message and cause.

        Raises:
            ConstructionError: tagged with the ConstructionFailure that occurred,
                chained to the underlying error
        """
        exception_class = self._exception_class
        try:
            factory = resolve_factory(exception_class)
        except FactoryNotFoundError as e:
            raise ConstructionError(ConstructionFailure.NOT_FOUND, exception_class) from e

        if not callable(factory):
            raise ConstructionError(ConstructionFailure.ACCESS_DENIED, exception_class) from TypeError(
                f"{exception_class.__qualname__}.from_message_and_cause is not callable"
            )
        if inspect.isabstract(exception_class):
            raise ConstructionError(ConstructionFailure.INSTANTIATION_FAILED, exception_class) from TypeError(
                f"Can't instantiate abstract class {exception_class.__qualname__}"
            )

        try:
            error = factory(self._message, self._cause)
        except Exception as e:
            raise ConstructionError(ConstructionFailure.INVOCATION_FAILED, exception_class) from e

        if type(error) is not exception_class:
            raise ConstructionError(ConstructionFailure.INSTANTIATION_FAILED, exception_class) from TypeError(
                f"factory returned {type(error).__qualname__}, expected {exception_class.__qualname__}"
            )

        logger.debug(
            "exception_built",
            exception_class=exception_class.__qualname__,
            has_message=self._message is not None,
            has_cause=self._cause is not None,
        )
        return error

    def __repr__(self) -> str:
        return (
            f"ExceptionBuilder(exception_class={self._exception_class.__qualname__}, "
            f"message={self._message!r}, cause={self._cause!r})"
        )
