"""
(message, cause) construction capability.

An exception class can be built by ExceptionBuilder when a factory
``factory(message, cause) -> instance`` can be resolved for it. Resolution
order:

1. a factory registered with ``register_factory``;
2. a ``from_message_and_cause`` classmethod on the class itself;
3. the default factory, for ``Exception`` subclasses whose constructor
   takes (message, cause) positionally, or a single positional message.
   The cause is chained through ``__cause__`` whenever the constructor does
   not chain it itself, exactly as ``raise ... from cause`` would.

Registration is expected to happen at import time; the registry is not
guarded by a lock.
"""

import inspect
from typing import Any, Callable, Dict, Optional

from exception_factory.domain.exceptions import FactoryNotFoundError, IllegalArgumentError
from exception_factory.domain.message_templates import OneArgTemplate
from exception_factory.infrastructure.logging import get_logger

logger = get_logger(__name__)

MessageAndCauseFactory = Callable[[Optional[str], Optional[BaseException]], BaseException]

FACTORY_HOOK = "from_message_and_cause"

_FACTORIES: Dict[type, MessageAndCauseFactory] = {}


def register_factory(exception_class: type, factory: MessageAndCauseFactory) -> None:
    """
    Register ``factory`` as the way to build ``exception_class``.

    Replaces any earlier registration for the same class.

    Example:
        >>> register_factory(KeyError, lambda message, cause: KeyError(message))
    """
    if exception_class is None:
        raise IllegalArgumentError(OneArgTemplate.MUST_NOT_BE_NULL.format("exceptionClass"))
    if not isinstance(exception_class, type):
        raise IllegalArgumentError(OneArgTemplate.MUST_BE_VALID.format("exceptionClass"))
    if factory is None:
        raise IllegalArgumentError(OneArgTemplate.MUST_NOT_BE_NULL.format("factory"))
    if not callable(factory):
        raise IllegalArgumentError(OneArgTemplate.MUST_BE_VALID.format("factory"))

    _FACTORIES[exception_class] = factory
    logger.debug("message_and_cause_factory_registered", exception_class=exception_class.__qualname__)


def unregister_factory(exception_class: type) -> bool:
    """Remove a registration. Returns False if none existed."""
    removed = _FACTORIES.pop(exception_class, None) is not None
    if removed:
        logger.debug("message_and_cause_factory_unregistered", exception_class=exception_class.__qualname__)
    return removed


def resolve_factory(exception_class: Any) -> Any:
    """
    Find the (message, cause) factory for ``exception_class``.

    The returned object is normally callable. A non-callable
    ``from_message_and_cause`` attribute is returned as-is so that
    ExceptionBuilder.build() can report it as an access failure.

    Raises:
        FactoryNotFoundError: if the class cannot be built from (message, cause)
    """
    if not isinstance(exception_class, type):
        raise FactoryNotFoundError(f"{exception_class!r} is not a class")

    registered = _FACTORIES.get(exception_class)
    if registered is not None:
        return registered

    hook = getattr(exception_class, FACTORY_HOOK, None)
    if hook is not None:
        return hook

    if issubclass(exception_class, Exception):
        shape = _constructor_shape(exception_class)
        if shape is not None:
            return _default_factory(exception_class, passes_cause=shape == 2)

    raise FactoryNotFoundError(
        f"{exception_class.__qualname__} has no (message, cause) factory",
        context={"exception_class": exception_class.__qualname__},
    )


def supports_message_and_cause(exception_class: Any) -> bool:
    """Capability check: can ``exception_class`` be built from (message, cause)?"""
    try:
        resolve_factory(exception_class)
    except FactoryNotFoundError:
        return False
    return True


def get_message(error: BaseException) -> Optional[Any]:
    """Message an exception was constructed with, or None if it had none."""
    return error.args[0] if error.args else None


def _constructor_shape(exception_class: type) -> Optional[int]:
    """
    How the default factory calls the constructor.

    2 for ``cls(message, cause)``, 1 for ``cls(message)``, None if neither.
    The two-argument form is used when the second positional parameter is
    named ``cause``; ``*args`` constructors such as ValueError and unrelated
    two-argument shapes such as ``(key, value)`` do not qualify for it.
    """
    try:
        signature = inspect.signature(exception_class)
    except (TypeError, ValueError):
        # C-level constructors without a text signature.
        return 1 if _constructs_from_message(exception_class) else None

    if _second_positional_is_cause(signature) and _binds(signature, 2):
        return 2
    if _binds(signature, 1):
        return 1
    return None


def _binds(signature: inspect.Signature, count: int) -> bool:
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    return True


def _second_positional_is_cause(signature: inspect.Signature) -> bool:
    positional = [
        p
        for p in signature.parameters.values()
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    return len(positional) >= 2 and positional[1].name == "cause"


def _constructs_from_message(exception_class: type) -> bool:
    """Trial ``cls(None)``; any error from the constructor means unsupported."""
    try:
        exception_class(None)
    except Exception:
        return False
    return True


def _default_factory(exception_class: type, passes_cause: bool = False) -> MessageAndCauseFactory:
    def factory(message: Optional[str], cause: Optional[BaseException]) -> BaseException:
        error = exception_class(message, cause) if passes_cause else exception_class(message)
        if cause is not None and error.__cause__ is None:
            error.__cause__ = cause
        return error

    factory.__qualname__ = f"default_factory[{exception_class.__qualname__}]"
    return factory
