"""
Directive specification and metadata models

Defines the structure of beamdown's colon-delimited directives
(:author:, :toc:, ...) for recognition, rendering and documentation.
"""

from dataclasses import dataclass, field
from typing import List

from .lines import SpecialToken


@dataclass
class DirectiveSpec:
    """
    Specification for a beamdown directive

    Attributes:
        token: SpecialToken produced when the directive is recognized
        marker: Colon-delimited marker searched for in the line (e.g. ":author:")
        command: LaTeX command emitted (without backslash)
        description: Human-readable description
        takes_argument: Whether the text after the marker becomes the
                        command argument. Directives without one emit
                        fixed markup.
        starts_document: Whether the directive opens the document body
                         when seen in the preamble
        examples: Example usage strings
    """
    token: SpecialToken
    marker: str
    command: str
    description: str
    takes_argument: bool = True
    starts_document: bool = False
    examples: List[str] = field(default_factory=list)

    def matches(self, line: str) -> bool:
        """Check if the marker appears anywhere in the line"""
        return self.marker in line

    def argument_extract(self, line: str) -> str:
        """
        Text following the marker with surrounding whitespace removed

        Example:
            ":author:  Jane Doe\\n" -> "Jane Doe"
        """
        _, _, remainder = line.partition(self.marker)
        return remainder.strip()


# Priority order used by the recognizer; first match wins
DIRECTIVE_PRIORITY: List[SpecialToken] = [
    SpecialToken.SECTION_PAGE,
    SpecialToken.AUTHOR,
    SpecialToken.DATE,
    SpecialToken.PACKAGE,
    SpecialToken.CAPTION,
    SpecialToken.LABEL,
    SpecialToken.TOC,
    SpecialToken.THEME,
    SpecialToken.COLOR_THEME,
    SpecialToken.INNER_THEME,
    SpecialToken.OUTER_THEME,
]
