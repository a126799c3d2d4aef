"""
Line classifier tests

Tests the precedence of line categories and the extra data the classifier
records (heading level, numbered-item prefix length).
"""

import pytest

from beamdown.lib.classifier import line_classify, heading_level, enumerate_prefixLength
from beamdown.models.lines import LineKind


class TestHeadings:
    """Test heading detection"""

    @pytest.mark.parametrize("line, level", [
        ("# Title\n", 1),
        ("## Section\n", 2),
        ("### Subsection\n", 3),
        ("#####Deep\n", 5),
    ])
    def test_level(self, line, level):
        """Level is the run of leading '#'"""
        classified = line_classify(line)
        assert classified.kind == LineKind.HEADING
        assert classified.level == level

    def test_heading_wins_over_blank_check(self):
        """A lone '#' is still a heading"""
        assert line_classify("#\n").kind == LineKind.HEADING

    def test_heading_level_only_hashes(self):
        """A line made only of '#' does not run past its end"""
        assert heading_level("###") == 3

    def test_heading_level_none(self):
        """Text without a leading '#' has level 0"""
        assert heading_level("Text") == 0


class TestBlank:
    """Test blank line detection"""

    @pytest.mark.parametrize("line", ["\n", "", "   \n", "\t\r\n"])
    def test_blank(self, line):
        """Empty and whitespace-only lines are blank"""
        assert line_classify(line).kind == LineKind.BLANK


class TestSlideTitleAndBullets:
    """Test '**' titles versus '*' bullets"""

    def test_slide_title(self):
        """A leading '**' marks a frame title"""
        assert line_classify("**Overview**\n").kind == LineKind.SLIDE_TITLE

    def test_slide_title_before_bullet(self):
        """'** ' is a title, not a bullet"""
        assert line_classify("** spaced\n").kind == LineKind.SLIDE_TITLE

    @pytest.mark.parametrize("line", ["* one\n", "- one\n", "-\tone\n"])
    def test_bullet(self, line):
        """'*' or '-' followed by whitespace is a bullet"""
        assert line_classify(line).kind == LineKind.BULLET_ITEM

    @pytest.mark.parametrize("line", ["*emphasis*\n", "-1 degrees\n"])
    def test_marker_without_space_is_text(self, line):
        """A marker glued to the text is not a bullet"""
        assert line_classify(line).kind == LineKind.PLAIN_TEXT


class TestNumbered:
    """Test numbered list detection"""

    @pytest.mark.parametrize("line, prefix", [
        ("1. First\n", 3),
        ("12. Twelfth\n", 4),
        ("111. Many\n", 5),
    ])
    def test_prefix_length(self, line, prefix):
        """Prefix covers the digits, the dot and one whitespace"""
        classified = line_classify(line)
        assert classified.kind == LineKind.NUMBERED_ITEM
        assert classified.prefix_length == prefix

    @pytest.mark.parametrize("line", [
        "1.5 apples\n",
        "2020 was a year\n",
        "3.\n",
        "1. \n",
    ])
    def test_not_numbered(self, line):
        """Digits without '. ' and content fall through to plain text"""
        assert line_classify(line).kind == LineKind.PLAIN_TEXT

    def test_enumerate_prefix_too_short(self):
        """At least one content character and a terminator must follow"""
        assert enumerate_prefixLength("1. a") == -1
        assert enumerate_prefixLength("1. a\n") == 3

    def test_enumerate_prefix_no_digits(self):
        """No leading digits means no prefix"""
        assert enumerate_prefixLength("a. b\n") == -1

    @pytest.mark.parametrize("line", [
        "٣. item\n",
        "². item\n",
        "①. item\n",
        "１. item\n",
    ])
    def test_non_ascii_digits_are_text(self, line):
        """Only ASCII 0-9 start a numbered item"""
        assert line_classify(line).kind == LineKind.PLAIN_TEXT

    def test_enumerate_prefix_non_ascii_digits(self):
        """Arabic-Indic and superscript digits never count toward the prefix"""
        assert enumerate_prefixLength("٣. item\n") == -1
        assert enumerate_prefixLength("1². item\n") == -1


class TestImageAndText:
    """Test image and plain text fallback"""

    def test_image(self):
        """'![' starts an image line"""
        assert line_classify("![](pic.png)\n").kind == LineKind.IMAGE

    def test_bang_without_bracket(self):
        """'!' alone is ordinary text"""
        assert line_classify("!important\n").kind == LineKind.PLAIN_TEXT

    def test_plain_text(self):
        """Anything else is plain text, kept verbatim"""
        classified = line_classify("Hello world\n")
        assert classified.kind == LineKind.PLAIN_TEXT
        assert classified.text == "Hello world\n"

    def test_latex_passthrough(self):
        """LaTeX commands are plain text"""
        assert line_classify("\\pause\n").kind == LineKind.PLAIN_TEXT
