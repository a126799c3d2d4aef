"""
Conversion errors

Structural malformations abort the whole run: once a frame or environment
fragment has been written it cannot be retracted, so there is no recovery.
"""

from typing import Optional


class ConversionError(Exception):
    """
    Base class for errors raised while converting a document

    Attributes:
        line: Offending input line (terminator stripped for display)
        line_number: 1-based position of the line in the input, when known
    """

    reason = "Conversion error"

    def __init__(self, line: str, line_number: Optional[int] = None, detail: str = ""):
        self.line = line.rstrip("\r\n")
        self.line_number = line_number
        self.detail = detail
        super().__init__(self.line)

    def __str__(self) -> str:
        return self.message_build()

    def message_build(self) -> str:
        """Assemble a one-line description with location and offending text"""
        where = f" (line {self.line_number})" if self.line_number is not None else ""
        detail = f" {self.detail}" if self.detail else ""
        return f"{self.reason}{where}:{detail} {self.line}"


class MalformedHeading(ConversionError):
    """Heading line without a positive '#' level"""
    reason = "Malformed heading"


class MalformedImage(ConversionError):
    """Image line with missing, duplicated or misordered ']' / ')'"""
    reason = "Malformed image line"


class MalformedBulletItem(ConversionError):
    """Bullet item not matching '[*|-] '"""
    reason = "Malformed bulleted list"


class MalformedNumberedItem(ConversionError):
    """Numbered item not matching '[0-9]+\\. '"""
    reason = "Malformed numbered list"


class UnsupportedFeature(ConversionError):
    """Input uses a feature beamdown does not handle (strict mode only)"""
    reason = "Unsupported feature"
