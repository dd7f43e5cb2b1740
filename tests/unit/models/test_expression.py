"""Tests for name matching expressions."""

import pytest

from boundedlayers.exceptions import ConfigurationError
from boundedlayers.models.expression import (
    ExpressionKind,
    NameSegmentExpression,
    RegexExpression,
    WildcardExpression,
    create_expression,
)


class TestNameSegmentExpression:
    """Test exact segment matching."""

    def test_matches_middle_segment(self):
        """Test matching a segment in the middle of a name."""
        assert NameSegmentExpression("Core").matches("App.Core.Test")

    def test_matches_whole_name(self):
        """Test matching a single-segment name."""
        assert NameSegmentExpression("Core").matches("Core")

    def test_no_substring_matches(self):
        """Test that partial segments do not match."""
        assert not NameSegmentExpression("Cor").matches("App.Core")
        assert not NameSegmentExpression("Core").matches("App.CoreLib")

    def test_is_case_sensitive(self):
        """Test case-sensitive comparison."""
        assert not NameSegmentExpression("core").matches("App.Core")

    def test_multi_segment_pattern_never_matches(self):
        """A pattern containing a dot can't equal a single segment."""
        assert not NameSegmentExpression("App.Core").matches("App.Core")

    def test_description(self):
        """Test that the description is the segment."""
        assert str(NameSegmentExpression("Shared")) == "Shared"

    def test_empty_pattern_rejected(self):
        """Test that empty segments are rejected."""
        with pytest.raises(ConfigurationError):
            NameSegmentExpression("")


class TestRegexExpression:
    """Test anchored regular expression matching."""

    def test_anchored_at_start(self):
        """Test anchoring at the start of the name."""
        assert not RegexExpression("Sh.*").matches("XShared")

    def test_matches_full_name(self):
        """Test a pattern covering the whole name."""
        assert RegexExpression("Sh.*").matches("Shared.Host")

    def test_anchored_at_end(self):
        """Test anchoring at the end of the name."""
        assert not RegexExpression("Shared").matches("Shared.Host")

    def test_alternation_stays_anchored(self):
        """Test that every alternative is anchored."""
        expression = RegexExpression("App|Shared")
        assert expression.matches("App")
        assert expression.matches("Shared")
        assert not expression.matches("AppX")
        assert not expression.matches("XShared")

    def test_description_includes_anchors(self):
        """Test that the description shows the anchors."""
        assert str(RegexExpression(r".*\.Host")) == r"^.*\.Host$"

    def test_invalid_pattern_fails_at_construction(self):
        """Test error for an invalid regex."""
        with pytest.raises(ConfigurationError, match="Invalid regular expression"):
            RegexExpression("Shared(")

    def test_leading_inline_flags(self):
        """Test that a leading inline flag group applies to the anchored pattern."""
        expression = RegexExpression("(?i)shared.*")
        assert expression.matches("Shared.Core")
        assert not expression.matches("XShared")
        assert str(expression) == "^(?i)shared.*$"

    def test_several_leading_flag_groups(self):
        """Test that consecutive flag groups are all moved before the anchor."""
        expression = RegexExpression("(?i)(?s)app|shared")
        assert expression.matches("APP")
        assert not expression.matches("App.Host")

    def test_scoped_flags_unchanged(self):
        """Test that scoped flag groups stay in place."""
        expression = RegexExpression("(?i:app)\\.Host")
        assert expression.matches("APP.Host")
        assert not expression.matches("APP.HOST")


class TestWildcardExpression:
    """Test the match-anything expression."""

    def test_matches_everything(self):
        """Test that any name matches."""
        expression = WildcardExpression()
        assert expression.matches("App.Host")
        assert expression.matches("")

    def test_description(self):
        """Test the wildcard description."""
        assert str(WildcardExpression()) == "ReferencesAnything"


class TestCreateExpression:
    """Test expression factory."""

    def test_name_segment_kind(self):
        """Test default kind creates segment matchers."""
        expression = create_expression(ExpressionKind.NAME_SEGMENT, "Core")
        assert isinstance(expression, NameSegmentExpression)

    def test_regex_prefix_with_name_segment_kind(self):
        """Test the r: prefix."""
        expression = create_expression(ExpressionKind.NAME_SEGMENT, "r:Sh.*")
        assert isinstance(expression, RegexExpression)
        assert str(expression) == "^Sh.*$"
        assert expression.matches("Shared")

    def test_regex_kind(self):
        """Test regex kind creates regex matchers."""
        expression = create_expression(ExpressionKind.REGEX, "Shared.*")
        assert isinstance(expression, RegexExpression)
        assert expression.matches("Shared.Host")

    def test_regex_kind_does_not_strip_prefix(self):
        """Test that r: is literal text in regex kind."""
        expression = create_expression(ExpressionKind.REGEX, "r:Sh.*")
        assert str(expression) == "^r:Sh.*$"

    def test_invalid_prefixed_regex(self):
        """Test error for an invalid r: pattern."""
        with pytest.raises(ConfigurationError):
            create_expression(ExpressionKind.NAME_SEGMENT, "r:[")

    def test_kind_from_string_value(self):
        """Test building the kind from its value."""
        assert ExpressionKind("regex") == ExpressionKind.REGEX
