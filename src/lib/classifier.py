"""
Line classifier for beamdown source

Assigns every non-directive line exactly one LineKind. Rules are tried in
order and the first that matches wins:

    1. '#'...            heading (level = run of leading '#')
    2. whitespace only   blank
    3. '**'...           slide title
    4. '* ' / '- '       bullet item
    5. '<digits>. '      numbered item
    6. '!['...           image
    7. anything else     plain text

Example:
    >>> line_classify("## Results\\n").kind
    <LineKind.HEADING: 'heading'>
    >>> line_classify("## Results\\n").level
    2
"""

from ..models.lines import ClassifiedLine, LineKind
from .text import blank_is, digit_is


def heading_level(line: str) -> int:
    """Number of consecutive leading '#' characters"""
    return len(line) - len(line.lstrip('#'))


def enumerate_prefixLength(line: str) -> int:
    """
    Length of a "<digits>. " numbered-item marker, or -1 if there is none

    The digit run must be non-empty, must be followed by '.' and a
    whitespace character, and must leave more than three characters
    from its end to the end of the line.

    Example:
        "1. Hello\\n"    -> 3
        "111. Hello\\n"  -> 5
        "1.5 apples\\n"  -> -1
    """
    digits = 0
    while digits < len(line) and digit_is(line[digits]):
        digits += 1

    if digits == 0 or digits >= len(line) - 3:
        return -1
    if line[digits] != '.' or not line[digits + 1].isspace():
        return -1
    return digits + 2


def line_classify(line: str) -> ClassifiedLine:
    """
    Classify a line that is known not to be a directive

    Args:
        line: Input line, terminator included

    Returns:
        ClassifiedLine with kind set, plus level for headings and
        prefix_length for numbered items
    """
    if line.startswith('#'):
        return ClassifiedLine(kind=LineKind.HEADING, text=line, level=heading_level(line))

    if blank_is(line):
        return ClassifiedLine(kind=LineKind.BLANK, text=line)

    if line.startswith('**'):
        return ClassifiedLine(kind=LineKind.SLIDE_TITLE, text=line)

    if len(line) > 1 and line[0] in '*-' and line[1].isspace():
        return ClassifiedLine(kind=LineKind.BULLET_ITEM, text=line)

    if digit_is(line[0]):
        prefix_length = enumerate_prefixLength(line)
        if prefix_length > 0:
            return ClassifiedLine(
                kind=LineKind.NUMBERED_ITEM, text=line, prefix_length=prefix_length
            )

    if line.startswith('!['):
        return ClassifiedLine(kind=LineKind.IMAGE, text=line)

    return ClassifiedLine(kind=LineKind.PLAIN_TEXT, text=line)
