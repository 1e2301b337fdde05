"""Tests for the illegal_argument_of / illegal_state_of shortcuts."""

import pytest

from exception_factory.application.exception_factory import illegal_argument_of, illegal_state_of
from exception_factory.domain.exceptions import IllegalArgumentError, IllegalStateError
from exception_factory.domain.message_templates import OneArgTemplate, TwoArgTemplate


@pytest.mark.parametrize("template", list(OneArgTemplate))
def test_one_arg_illegal_argument_of(template):
    error = illegal_argument_of("test", template)
    assert type(error) is IllegalArgumentError
    assert isinstance(error, ValueError)
    assert str(error) == template.format("test")


@pytest.mark.parametrize("template", list(TwoArgTemplate))
def test_two_arg_illegal_argument_of(template):
    error = illegal_argument_of("testKey", template, "testValue")
    assert type(error) is IllegalArgumentError
    assert str(error) == template.format("testKey", "testValue")


@pytest.mark.parametrize("template", list(OneArgTemplate))
def test_one_arg_illegal_state_of(template):
    error = illegal_state_of("test", template)
    assert type(error) is IllegalStateError
    assert isinstance(error, RuntimeError)
    assert str(error) == template.format("test")


@pytest.mark.parametrize("template", list(TwoArgTemplate))
def test_two_arg_illegal_state_of(template):
    error = illegal_state_of("testKey", template, "testValue")
    assert type(error) is IllegalStateError
    assert str(error) == template.format("testKey", "testValue")


def test_returned_not_raised():
    error = illegal_argument_of("username", OneArgTemplate.MUST_NOT_BE_NULL)
    assert str(error) == "`username` MUST NOT be `null`"
    assert error.__cause__ is None

    with pytest.raises(IllegalArgumentError, match="username"):
        raise error


def test_none_key_and_value():
    assert str(illegal_state_of(None, TwoArgTemplate.MUST_BE_EQUAL_TO, None)) == "`None` MUST be equal to `None`"


@pytest.mark.parametrize("shortcut", [illegal_argument_of, illegal_state_of])
def test_none_template(shortcut):
    with pytest.raises(IllegalArgumentError) as exc_info:
        shortcut("key", None)
    assert str(exc_info.value) == "`messageTemplate` MUST NOT be `null`"
