"""
Domain enums.

RequirementLevel follows RFC 2119 ("Key words for use in RFCs to Indicate
Requirement Levels"). The display strings are the keywords exactly as they
appear inside rendered messages.
"""

from enum import Enum


class RequirementLevel(str, Enum):
    """
    RFC 2119 requirement keyword.

    str() yields the keyword as written in prose, e.g. ``MUST NOT``.
    """

    MAY = "MAY"
    MUST = "MUST"
    MUST_NOT = "MUST NOT"
    NOT_RECOMMENDED = "NOT RECOMMENDED"
    OPTIONAL = "OPTIONAL"
    RECOMMENDED = "RECOMMENDED"
    REQUIRED = "REQUIRED"
    SHALL = "SHALL"
    SHALL_NOT = "SHALL NOT"
    SHOULD = "SHOULD"
    SHOULD_NOT = "SHOULD NOT"

    def __str__(self) -> str:
        return self.value


class ConstructionFailure(str, Enum):
    """
    Why ExceptionBuilder.build() could not produce an instance.

    The value is used verbatim as the ConstructionError message.
    """

    NOT_FOUND = "not-found"
    INVOCATION_FAILED = "invocation-failed"
    INSTANTIATION_FAILED = "instantiation-failed"
    ACCESS_DENIED = "access-denied"

    def __str__(self) -> str:
        return self.value
