"""Tests for RFC 2119 requirement keywords."""

import pytest

from exception_factory.domain.enums import ConstructionFailure, RequirementLevel


@pytest.mark.parametrize("level", list(RequirementLevel))
def test_str_replaces_underscores(level):
    assert str(level) == level.name.replace("_", " ")


def test_multi_word_keyword():
    assert str(RequirementLevel.MUST_NOT) == "MUST NOT"
    assert str(RequirementLevel.NOT_RECOMMENDED) == "NOT RECOMMENDED"


def test_keyword_count():
    assert len(RequirementLevel) == 11


def test_construction_failure_labels():
    assert [str(f) for f in ConstructionFailure] == [
        "not-found",
        "invocation-failed",
        "instantiation-failed",
        "access-denied",
    ]
