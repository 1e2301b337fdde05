"""
exception-factory: exceptions with standardized, templated messages.

Provides:
- ExceptionBuilder for any exception class buildable from (message, cause)
- OneArgTemplate / TwoArgTemplate message catalogs
- MessageBuilder for assembling ad hoc templates
- illegal_argument_of / illegal_state_of shortcuts
"""

from .application.capabilities import (
    get_message,
    register_factory,
    resolve_factory,
    supports_message_and_cause,
    unregister_factory,
)
from .application.exception_builder import ExceptionBuilder
from .application.exception_factory import illegal_argument_of, illegal_state_of
from .domain.enums import ConstructionFailure, RequirementLevel
from .domain.exceptions import (
    ConstructionError,
    ExceptionFactoryError,
    FactoryNotFoundError,
    IllegalArgumentError,
    IllegalStateError,
    UnsupportedTypeError,
)
from .domain.message_builder import MessageBuilder, format_specifier
from .domain.message_templates import OneArgTemplate, TwoArgTemplate

__version__ = "0.1.0"

__all__ = [
    "ExceptionBuilder",
    "illegal_argument_of",
    "illegal_state_of",
    "OneArgTemplate",
    "TwoArgTemplate",
    "MessageBuilder",
    "format_specifier",
    "RequirementLevel",
    "ConstructionFailure",
    "register_factory",
    "unregister_factory",
    "resolve_factory",
    "supports_message_and_cause",
    "get_message",
    "ExceptionFactoryError",
    "IllegalArgumentError",
    "IllegalStateError",
    "UnsupportedTypeError",
    "ConstructionError",
    "FactoryNotFoundError",
]
