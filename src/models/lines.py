"""
Line and document-state models

Enumerations and small records shared by the classifier, the directive
registry and the compiler state machine.
"""

from enum import Enum
from dataclasses import dataclass


class Location(Enum):
    """Where the compiler currently is in the output document"""
    PREAMBLE = "preamble"    # before \begin{document}
    NO_FRAME = "no_frame"    # document body, between frames
    IN_FRAME = "in_frame"    # inside \begin{frame}


class Environment(Enum):
    """
    Content environment open inside the current frame

    At most one is open at a time. TEXT is a legacy tag that never
    produces markup of its own.
    """
    NONE = "none"
    TEXT = "text"
    FIGURE = "figure"
    BULLET_LIST = "itemize"
    NUMBER_LIST = "enumerate"


class SpecialToken(Enum):
    """Result of recognizing a colon-delimited directive line"""
    NONE = "none"
    AUTHOR = "author"
    DATE = "date"
    CAPTION = "caption"
    LABEL = "label"
    TOC = "toc"
    SECTION_PAGE = "sectionpage"
    THEME = "theme"
    PACKAGE = "pkg"
    COLOR_THEME = "colors"
    INNER_THEME = "inner"
    OUTER_THEME = "outer"
    UNDEFINED = "undefined"


class LineKind(Enum):
    """Syntactic category of a non-directive line"""
    HEADING = "heading"
    BLANK = "blank"
    SLIDE_TITLE = "slide_title"
    BULLET_ITEM = "bullet_item"
    NUMBERED_ITEM = "numbered_item"
    IMAGE = "image"
    PLAIN_TEXT = "plain_text"


@dataclass
class ClassifiedLine:
    """
    Result of classifying a single input line

    Returned by line_classify(). The original line is carried along
    untouched so emitters can slice it.

    Attributes:
        kind: Category the line falls into
        text: The line exactly as read, terminator included
        level: Heading level (count of leading '#'), 0 for other kinds
        prefix_length: For numbered items, length of the "<digits>. "
                       marker to skip; 0 for other kinds

    Example:
        line_classify("12. Twelfth\\n")
        ClassifiedLine(kind=LineKind.NUMBERED_ITEM, text="12. Twelfth\\n",
                       level=0, prefix_length=4)
    """
    kind: LineKind
    text: str
    level: int = 0
    prefix_length: int = 0


@dataclass
class ImageDirective:
    """
    Parsed ![caption](path) line

    Attributes:
        caption: Text between '[' and ']' (may be empty)
        path: Text between '](' and ')'
    """
    caption: str
    path: str
