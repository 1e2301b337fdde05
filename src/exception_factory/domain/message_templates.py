"""
Catalog of message templates.

Two closed families, keyed by the number of values they substitute:

    OneArgTemplate.MUST_NOT_BE_NULL.format("username")
        -> "`username` MUST NOT be `null`"
    TwoArgTemplate.MUST_BE_AT_LEAST.format("age", "18")
        -> "`age` MUST be at least `18`"

Template names and their rendered phrasing are a compatibility contract:
callers assert on the literal strings.
"""

from enum import Enum
from typing import Any, Optional

from exception_factory.domain.enums import RequirementLevel
from exception_factory.domain.message_builder import MessageBuilder, format_specifier

MUST = RequirementLevel.MUST
MUST_NOT = RequirementLevel.MUST_NOT


def _subject(level: RequirementLevel, *words: str) -> MessageBuilder:
    builder = MessageBuilder.new_builder().add_code_quote(format_specifier(str)).add(level)
    for word in words:
        builder.add(word)
    return builder


def _one_arg(level: RequirementLevel, *words: str, literal: Optional[str] = None) -> str:
    builder = _subject(level, *words)
    if literal is not None:
        builder.add_code_quote(literal)
    return str(builder)


def _two_arg(level: RequirementLevel, *words: str) -> str:
    return str(_subject(level, *words).add_code_quote(format_specifier(str)))


class OneArgTemplate(Enum):
    """Templates rendering a single code-quoted value followed by a predicate."""

    MUST_BE_FALSE = _one_arg(MUST, "be", literal="false")
    MUST_BE_NEGATIVE = _one_arg(MUST, "be", "negative")
    MUST_BE_POSITIVE = _one_arg(MUST, "be", "positive")
    MUST_BE_TRUE = _one_arg(MUST, "be", literal="true")
    MUST_BE_UNIQUE = _one_arg(MUST, "be", "unique")
    MUST_BE_VALID = _one_arg(MUST, "be", "valid")
    MUST_EXIST = _one_arg(MUST, "exist")
    MUST_NOT_BE_EMPTY = _one_arg(MUST_NOT, "be", "empty")
    MUST_NOT_BE_NEGATIVE = _one_arg(MUST_NOT, "be", "negative")
    MUST_NOT_BE_NULL = _one_arg(MUST_NOT, "be", literal="null")
    MUST_NOT_BE_POSITIVE = _one_arg(MUST_NOT, "be", "positive")
    MUST_NOT_EXIST = _one_arg(MUST_NOT, "exist")

    @property
    def template(self) -> str:
        """Raw format string, with its ``%s`` placeholder."""
        return self.value

    @property
    def arity(self) -> int:
        return 1

    def format(self, arg: Any) -> str:
        return self.value % (arg,)

    def __str__(self) -> str:
        return self.value


class TwoArgTemplate(Enum):
    """Templates rendering two code-quoted values around a predicate."""

    MUST_BE_AT_LEAST = _two_arg(MUST, "be", "at", "least")
    MUST_BE_AT_MOST = _two_arg(MUST, "be", "at", "most")
    MUST_BE_EQUAL_TO = _two_arg(MUST, "be", "equal", "to")
    MUST_BE_GREATER_THAN = _two_arg(MUST, "be", "greater", "than")
    MUST_BE_INSTANCE_OF = _two_arg(MUST, "be", "an", "instance", "of")
    MUST_BE_LESS_THAN = _two_arg(MUST, "be", "less", "than")
    MUST_BE_OF_LENGTH = _two_arg(MUST, "be", "of", "length")
    MUST_BE_OF_SIZE = _two_arg(MUST, "be", "of", "size")
    MUST_CONTAIN = _two_arg(MUST, "contain")
    MUST_MATCH_REGEX = _two_arg(MUST, "match", "RegEx")
    MUST_NOT_BE_EQUAL_TO = _two_arg(MUST_NOT, "be", "equal", "to")
    MUST_NOT_BE_INSTANCE_OF = _two_arg(MUST_NOT, "be", "an", "instance", "of")
    MUST_NOT_CONTAIN = _two_arg(MUST_NOT, "contain")

    @property
    def template(self) -> str:
        """Raw format string, with both ``%s`` placeholders."""
        return self.value

    @property
    def arity(self) -> int:
        return 2

    def format(self, arg_one: Any, arg_two: Any) -> str:
        return self.value % (arg_one, arg_two)

    def __str__(self) -> str:
        return self.value
