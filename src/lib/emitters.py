"""
Content emitters: classified lines to LaTeX fragments

Each emitter strips the Markdown decoration from one line and returns the
LaTeX it stands for. Emitters are pure functions of their input; opening
and closing frames and environments is the compiler's job.

Every emitter re-checks the shape it expects even though the classifier
already guarantees it, so a line routed to the wrong emitter fails loudly.
"""

from ..models.lines import ImageDirective
from .errors import (
    MalformedHeading,
    MalformedImage,
    MalformedBulletItem,
    MalformedNumberedItem,
)
from .text import whitespace_strip, digits_are


def heading_render(line: str, level: int) -> str:
    """
    Render a '#' heading

    Level 1 becomes the document title, level 2 a section and every
    further level adds one "sub".

    Example:
        ("# Talk\\n", 1)        -> "\\title{Talk}\\n"
        ("## Intro\\n", 2)      -> "\\n\\section{Intro}\\n"
        ("#### Detail\\n", 4)   -> "\\n\\subsubsection{Detail}\\n"

    Raises:
        MalformedHeading: If level is not positive
    """
    if level <= 0:
        raise MalformedHeading(line)

    heading = whitespace_strip(line[level:])

    if level == 1:
        return f"\\title{{{heading}}}\n"

    return f"\n\\{'sub' * (level - 2)}section{{{heading}}}\n"


def frameTitle_render(line: str) -> str:
    """
    Render a '**Title**' line as a frame title

    The leading '**' is skipped and one trailing '**' pair, if present
    after stripping, is removed.
    """
    title = whitespace_strip(line[2:])
    if title.endswith('**'):
        title = title[:-2]
    return f"\\frametitle{{{title}}}\n"


def bullet_render(line: str) -> str:
    """
    Render a '* item' or '- item' line as an itemize entry

    Raises:
        MalformedBulletItem: If the line does not match "[*|-] "
    """
    if len(line) < 2 or line[0] not in '*-' or not line[1].isspace():
        raise MalformedBulletItem(line, detail="Must match '[*|-] '")
    return f"\\item{{{whitespace_strip(line[2:])}}}\n"


def numbered_render(line: str, prefix_length: int) -> str:
    """
    Render a '12. item' line as an enumerate entry

    Args:
        line: Numbered item line
        prefix_length: Length of the "<digits>. " marker, as found by
                       the classifier

    Raises:
        MalformedNumberedItem: If the marker is not "<digits>. "
    """
    digits = line[:prefix_length - 2]
    if (
        prefix_length < 3
        or len(line) < prefix_length
        or not digits_are(digits)
        or line[prefix_length - 2] != '.'
        or not line[prefix_length - 1].isspace()
    ):
        raise MalformedNumberedItem(line, detail="Must match '[0-9]*\\. '")
    return f"\\item{{{whitespace_strip(line[prefix_length:])}}}\n"


def image_parse(line: str) -> ImageDirective:
    """
    Parse a '![caption](path)' line

    Exactly one ']' and one ')' are allowed after the opening "![", and
    the ']' must come first. The path starts two characters after the ']'
    (skipping the '(') and ends just before the ')'.

    Example:
        "![](figures/plot.pdf)\\n" -> ImageDirective(caption="", path="figures/plot.pdf")

    Raises:
        MalformedImage: On a missing, repeated or misordered delimiter
    """
    if not line.startswith('!['):
        raise MalformedImage(line)

    caption_end = None
    path_end = None

    for index in range(2, len(line)):
        if line[index] == ']':
            if caption_end is not None:
                raise MalformedImage(line, detail="repeated ']'")
            caption_end = index
        elif line[index] == ')':
            if path_end is not None:
                raise MalformedImage(line, detail="repeated ')'")
            path_end = index

    if caption_end is None or path_end is None:
        raise MalformedImage(line, detail="missing ']' or ')'")
    if path_end < caption_end:
        raise MalformedImage(line, detail="')' before ']'")

    return ImageDirective(caption=line[2:caption_end], path=line[caption_end + 2:path_end])


def image_render(image: ImageDirective, graphics_options: str) -> str:
    """Render a parsed image as an \\includegraphics command"""
    return f"\\includegraphics[{graphics_options}]{{{image.path}}}\n"


def text_render(line: str) -> str:
    """
    Pass a plain-text line through untouched

    No escaping is done; the input is responsible for valid LaTeX. A line
    without a terminator (the last line of a file) gets one.
    """
    if line.endswith('\n'):
        return line
    return f"{line}\n"
