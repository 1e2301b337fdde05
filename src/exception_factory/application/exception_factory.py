"""
Shortcuts for the two most common exception kinds.

Both functions *return* the exception; raising it is up to the caller:

    raise illegal_argument_of("username", OneArgTemplate.MUST_NOT_BE_NULL)
"""

from typing import Optional

from exception_factory.application.exception_builder import ExceptionBuilder, MessageTemplate
from exception_factory.domain.exceptions import IllegalArgumentError, IllegalStateError


def illegal_argument_of(
    key: Optional[str], message_template: MessageTemplate, *message_args: Optional[str]
) -> IllegalArgumentError:
    """
    IllegalArgumentError with message ``message_template.format(key, *message_args)``.

    Pass one extra value for a TwoArgTemplate, none for a OneArgTemplate.
    """
    return (
        ExceptionBuilder.of(IllegalArgumentError)
        .set_message_from_template(message_template, key, *message_args)
        .build()
    )


def illegal_state_of(
    key: Optional[str], message_template: MessageTemplate, *message_args: Optional[str]
) -> IllegalStateError:
    """IllegalStateError with message ``message_template.format(key, *message_args)``."""
    return (
        ExceptionBuilder.of(IllegalStateError)
        .set_message_from_template(message_template, key, *message_args)
        .build()
    )
