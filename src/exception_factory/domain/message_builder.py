"""
Fluent assembly of message and template strings.

Tokens are joined with single spaces in the order they were added:

    >>> str(MessageBuilder.new_builder().add("a").add_code_quote("b").add_format_specifier(str))
    'a `b` %s'

Instances are plain mutable objects; do not share one across threads.
"""

from typing import Any, List


def format_specifier(format_class: Any) -> str:
    """
    Return the %-style placeholder for values of ``format_class``.

    ``int`` maps to ``%d`` and ``float`` to ``%f``; everything else
    (including ``bool``) is rendered with ``%s``.
    """
    if format_class is None:
        _raise_must_not_be_null("formatClass")
    if format_class is int:
        return "%d"
    if format_class is float:
        return "%f"
    return "%s"


def _raise_must_not_be_null(name: str) -> None:
    # Imported here: the template catalog is itself assembled with MessageBuilder.
    from exception_factory.application.exception_factory import illegal_argument_of
    from exception_factory.domain.message_templates import OneArgTemplate

    raise illegal_argument_of(name, OneArgTemplate.MUST_NOT_BE_NULL)


class MessageBuilder:
    """Accumulates words and renders them space-separated."""

    def __init__(self) -> None:
        self._words: List[str] = []

    @classmethod
    def new_builder(cls) -> "MessageBuilder":
        return cls()

    def add_format_specifier(self, format_class: Any) -> "MessageBuilder":
        """Append a bare placeholder chosen by ``format_class``."""
        if format_class is None:
            _raise_must_not_be_null("formatClass")
        return self.add(format_specifier(format_class))

    def add_code_quote(self, value: Any) -> "MessageBuilder":
        """Append ``value`` wrapped in backticks."""
        if value is None:
            _raise_must_not_be_null("object")
        return self.add(f"`{value}`")

    def add(self, value: Any) -> "MessageBuilder":
        if value is None:
            _raise_must_not_be_null("object")
        self._words.append(str(value))
        return self

    def __len__(self) -> int:
        return len(self._words)

    def __str__(self) -> str:
        return " ".join(self._words)

    def __repr__(self) -> str:
        return f"MessageBuilder({str(self)!r})"
