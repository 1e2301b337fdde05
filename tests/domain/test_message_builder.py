"""Tests for MessageBuilder token assembly."""

import pytest

from exception_factory.domain.enums import RequirementLevel
from exception_factory.domain.exceptions import IllegalArgumentError
from exception_factory.domain.message_builder import MessageBuilder, format_specifier


class TestMessageBuilder:
    """Test suite for MessageBuilder."""

    def test_words_joined_with_single_spaces(self):
        builder = MessageBuilder.new_builder().add("a").add_code_quote("b").add_format_specifier(str)
        assert str(builder) == "a `b` %s"

    def test_empty_builder_renders_empty_string(self):
        assert str(MessageBuilder.new_builder()) == ""

    def test_render_is_idempotent(self):
        builder = MessageBuilder.new_builder().add("one").add("two")
        assert str(builder) == str(builder) == "one two"
        assert len(builder) == 2

    def test_add_uses_str_of_value(self):
        builder = MessageBuilder.new_builder().add(42).add(RequirementLevel.MUST_NOT)
        assert str(builder) == "42 MUST NOT"

    def test_code_quote_wraps_in_backticks(self):
        assert str(MessageBuilder.new_builder().add_code_quote("null")) == "`null`"
        assert str(MessageBuilder.new_builder().add_code_quote(3.5)) == "`3.5`"

    @pytest.mark.parametrize(
        "format_class, expected",
        [(int, "%d"), (float, "%f"), (str, "%s"), (bool, "%s"), (dict, "%s")],
    )
    def test_format_specifier(self, format_class, expected):
        assert format_specifier(format_class) == expected
        assert str(MessageBuilder.new_builder().add_format_specifier(format_class)) == expected

    def test_assembled_template_formats(self):
        template = str(
            MessageBuilder.new_builder()
            .add_code_quote(format_specifier(str))
            .add(RequirementLevel.MUST)
            .add("be")
            .add("at")
            .add("most")
            .add_code_quote(format_specifier(int))
        )
        assert template == "`%s` MUST be at most `%d`"
        assert template % ("retries", 3) == "`retries` MUST be at most `3`"

    def test_add_none_raises(self):
        with pytest.raises(IllegalArgumentError) as exc_info:
            MessageBuilder.new_builder().add(None)
        assert str(exc_info.value) == "`object` MUST NOT be `null`"

    def test_add_code_quote_none_raises(self):
        with pytest.raises(IllegalArgumentError) as exc_info:
            MessageBuilder.new_builder().add_code_quote(None)
        assert str(exc_info.value) == "`object` MUST NOT be `null`"

    def test_add_format_specifier_none_raises(self):
        with pytest.raises(IllegalArgumentError) as exc_info:
            MessageBuilder.new_builder().add_format_specifier(None)
        assert str(exc_info.value) == "`formatClass` MUST NOT be `null`"

    def test_rejected_token_leaves_builder_unchanged(self):
        builder = MessageBuilder.new_builder().add("kept")
        with pytest.raises(IllegalArgumentError):
            builder.add(None)
        assert str(builder) == "kept"
