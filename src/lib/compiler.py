"""
Compiler for beamdown source to LaTeX beamer

Drives the document/frame/environment state machine one line at a time
and writes markup fragments to an append-only sink.
"""

from typing import Any, Dict, Iterable, List, Optional, TextIO

from ..config import appsettings
from ..models.lines import Environment, LineKind, Location, SpecialToken
from .classifier import line_classify
from .directives import DirectiveRegistry
from .emitters import (
    bullet_render,
    frameTitle_render,
    heading_render,
    image_parse,
    image_render,
    numbered_render,
    text_render,
)
from .errors import ConversionError, UnsupportedFeature
from .log import LOG, WARN


# Markup closing each environment; NONE and TEXT close silently
ENVIRONMENT_END: Dict[Environment, str] = {
    Environment.FIGURE: "\\end{figure}\n",
    Environment.BULLET_LIST: "\\end{itemize}\n",
    Environment.NUMBER_LIST: "\\end{enumerate}\n",
}

ENVIRONMENT_BEGIN: Dict[Environment, str] = {
    Environment.FIGURE: "\\begin{figure}\n",
    Environment.BULLET_LIST: "\\begin{itemize}\n",
    Environment.NUMBER_LIST: "\\begin{enumerate}\n",
}


class Compiler:
    """
    Compiles beamdown lines to a LaTeX beamer document

    Responsibilities:
    - Write the fixed preamble
    - Route directive lines to the DirectiveRegistry
    - Classify every other line and open/close the document body,
      frames and environments it requires
    - Emit each line's own markup
    - Flush open frames/environments and close the document at the end

    State:
        location: Location in the output document, starts at PREAMBLE
        environment: Environment open inside the current frame, starts at NONE
    """

    def __init__(
        self,
        sink: TextIO,
        titlepage: Optional[bool] = None,
        strict: Optional[bool] = None,
        settings: Any = None,
    ) -> None:
        """
        Initialize compiler

        Args:
            sink: Destination with a write(str) method (file, StringIO, stdout)
            titlepage: Emit a title slide when the document body opens
                       (defaults to settings.titlepage)
            strict: Raise on unsupported features instead of warning
                    (defaults to settings.strict_mode)
            settings: AppSettings instance (defaults to the appsettings singleton)
        """
        if settings is None:
            settings = appsettings

        self.sink = sink
        self.settings = settings
        self.titlepage = settings.titlepage if titlepage is None else titlepage
        self.strict = settings.strict_mode if strict is None else strict
        self.directives = DirectiveRegistry()

        self.location = Location.PREAMBLE
        self.environment = Environment.NONE

        self.line_count = 0
        self.frame_count = 0
        self.diagnostics: List[str] = []

    def compile(self, lines: Iterable[str]) -> Dict[str, Any]:
        """
        Convert a whole document

        Writes the preamble, processes every line in order and closes the
        document.

        Args:
            lines: Source lines, terminators included

        Returns:
            dict with conversion results and statistics

        Raises:
            ConversionError: On the first malformed line; output written so
                             far is left in the sink
        """
        LOG("Starting conversion...", level=2)

        self.preamble_write()
        for line in lines:
            self.line_process(line)
        self.document_finish()

        LOG(f"Processed {self.line_count} lines into {self.frame_count} frames", level=2)

        return {
            'status': True,
            'line_count': self.line_count,
            'frame_count': self.frame_count,
            'diagnostics': list(self.diagnostics),
        }

    def emit(self, fragment: str) -> None:
        """Append a markup fragment to the sink"""
        self.sink.write(fragment)

    def preamble_write(self) -> None:
        """Write the fixed preamble (document class and graphics package)"""
        self.emit(f"\\documentclass{{{self.settings.document_class}}}\n")
        self.emit(f"\\usepackage{{{self.settings.graphics_package}}}\n")

    def line_process(self, line: str) -> None:
        """
        Process one input line

        Directives are handled first and never touch frame state; every
        other line is classified and dispatched.

        Raises:
            ConversionError: With line_number set, for malformed lines
        """
        self.line_count += 1

        try:
            token = self.directives.token_recognize(line)
            if token != SpecialToken.NONE:
                LOG(f"{self.line_count:>4} directive {token.value}", level=3)
                self.directive_process(token, line)
                return

            classified = line_classify(line)
            LOG(f"{self.line_count:>4} {classified.kind.value} [{self.location.value}]", level=3)

            if classified.kind == LineKind.HEADING:
                self.heading_process(classified.text, classified.level)
            elif classified.kind == LineKind.BLANK:
                self.frame_close()
            elif classified.kind == LineKind.SLIDE_TITLE:
                self.frame_ensureOpen()
                self.emit(frameTitle_render(classified.text))
            elif classified.kind == LineKind.BULLET_ITEM:
                self.environment_switch(Environment.BULLET_LIST)
                self.emit(bullet_render(classified.text))
            elif classified.kind == LineKind.NUMBERED_ITEM:
                self.environment_switch(Environment.NUMBER_LIST)
                self.emit(numbered_render(classified.text, classified.prefix_length))
            elif classified.kind == LineKind.IMAGE:
                self.image_process(classified.text)
            else:
                self.frame_ensureOpen()
                self.emit(text_render(classified.text))
        except ConversionError as error:
            if error.line_number is None:
                error.line_number = self.line_count
            raise

    def directive_process(self, token: SpecialToken, line: str) -> None:
        """Emit a directive, opening the document body first if it needs one"""
        spec = self.directives.spec_get(token)
        if spec is not None and spec.starts_document and self.location == Location.PREAMBLE:
            self.document_start()
        self.emit(self.directives.directive_render(token, line))

    def heading_process(self, line: str, level: int) -> None:
        """
        Emit a heading, leaving any open frame for sections

        Sections and subsections live between frames, so a level >= 2
        heading opens the document body or closes the current frame. The
        level-1 title only sets \\title and leaves the location alone.
        """
        if level > 1 and self.location != Location.NO_FRAME:
            if self.location == Location.PREAMBLE:
                self.document_start()
            else:
                self.frame_close()
            self.location = Location.NO_FRAME
        self.emit(heading_render(line, level))

    def image_process(self, line: str) -> None:
        """Emit an image inside a figure environment"""
        self.frame_ensureOpen()
        self.environment_open(Environment.FIGURE)

        image = image_parse(line)
        self.emit(image_render(image, self.settings.graphics_options))

        if image.caption:
            message = "In-line captions not supported at this moment"
            if self.strict:
                raise UnsupportedFeature(line, detail=message)
            self.diagnostics.append(f"line {self.line_count}: {message}")
            WARN(message)

    def document_start(self) -> None:
        """Open the document body, with a title slide if configured"""
        self.emit("\n\\begin{document}\n")
        if self.titlepage:
            self.emit("\n\\frame{\\titlepage}\n")
        self.location = Location.NO_FRAME

    def frame_ensureOpen(self) -> None:
        """Make sure a frame is open, starting the document body if needed"""
        if self.location == Location.IN_FRAME:
            return
        if self.location == Location.PREAMBLE:
            self.document_start()
        self.emit("\n\\begin{frame}\n")
        self.location = Location.IN_FRAME
        self.frame_count += 1

    def frame_close(self) -> None:
        """Close the open environment and frame; no-op outside a frame"""
        if self.location != Location.IN_FRAME:
            return
        self.environment_close()
        self.emit("\\end{frame}\n")
        self.location = Location.NO_FRAME

    def environment_open(self, environment: Environment) -> None:
        """Open an environment unless it is already the open one"""
        if self.environment == environment:
            return
        self.environment_close()
        self.emit(ENVIRONMENT_BEGIN[environment])
        self.environment = environment

    def environment_switch(self, environment: Environment) -> None:
        """Open a list environment inside a frame"""
        self.frame_ensureOpen()
        self.environment_open(environment)

    def environment_close(self) -> None:
        """Close the open environment, if any. Safe to call repeatedly."""
        fragment = ENVIRONMENT_END.get(self.environment)
        if fragment:
            self.emit(fragment)
        self.environment = Environment.NONE

    def document_finish(self) -> None:
        """
        Flush and close the document

        Closes any open frame and its environment. A document that never
        left the preamble still gets its body opened, so the output always
        pairs \\begin{document} with \\end{document}.
        """
        if self.location == Location.PREAMBLE:
            self.document_start()
        self.frame_close()
        self.emit("\\end{document}\n")
