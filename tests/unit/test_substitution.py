"""Unit tests for positional substitution."""

import html

import pytest

from src.lib.exceptions import SubstitutionError
from src.lib.substitution import count_placeholders, substitute


class TestCountPlaceholders:
    """Tests for placeholder counting."""

    def test_no_placeholders(self):
        assert count_placeholders("Plain text") == 0

    def test_mixed_placeholders(self):
        assert count_placeholders("%s has %d items") == 2

    def test_escaped_percent_not_counted(self):
        assert count_placeholders("100%% of %s") == 1

    def test_unsupported_sequence_raises(self):
        with pytest.raises(SubstitutionError):
            count_placeholders("%x")


class TestSubstitute:
    """Tests for the substitution function."""

    def test_substitutes_in_order(self):
        """Values fill placeholders strictly left to right."""
        result = substitute("Hello %s, code %s", ["Alice", "42"])

        assert result == "Hello Alice, code 42"

    def test_integer_placeholder(self):
        assert substitute("%d minutes", [" 15 "]) == "15 minutes"

    def test_integer_placeholder_rejects_text(self):
        with pytest.raises(SubstitutionError) as exc_info:
            substitute("%d minutes", ["soon"])

        assert "soon" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["+5", "-3", "007"])
    def test_integer_placeholder_accepts_signed_digits(self, value):
        assert substitute("%d", [value]) == str(int(value))

    @pytest.mark.parametrize("value", ["1_000", "\u0661\u0662", "1.5", "", "+"])
    def test_integer_placeholder_requires_ascii_digits(self, value):
        with pytest.raises(SubstitutionError):
            substitute("%d items", [value])

    def test_escaped_percent(self):
        """%% renders a single percent sign."""
        assert substitute("100%% done", []) == "100% done"

    def test_no_placeholders_no_values(self):
        assert substitute("Nothing to fill", []) == "Nothing to fill"

    def test_too_few_values(self):
        with pytest.raises(SubstitutionError) as exc_info:
            substitute("%s and %s", ["one"])

        assert exc_info.value.expected == 2
        assert exc_info.value.supplied == 1

    def test_too_many_values(self):
        with pytest.raises(SubstitutionError) as exc_info:
            substitute("Only %s", ["one", "two"])

        assert exc_info.value.expected == 1
        assert exc_info.value.supplied == 2

    def test_dangling_percent_raises(self):
        with pytest.raises(SubstitutionError):
            substitute("50%", [])

    def test_values_are_not_reinterpreted(self):
        """Placeholders inside values stay literal."""
        assert substitute("%s", ["%s%d"]) == "%s%d"

    def test_escape_applied_to_values_only(self):
        result = substitute("<b>%s</b>", ["<script>"], escape=html.escape)

        assert result == "<b>&lt;script&gt;</b>"
