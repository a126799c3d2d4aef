#!/usr/bin/env python3
"""
beamdown - Markdown to LaTeX beamer converter

Converts a plain-text, Markdown-like outline into a LaTeX beamer deck.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Source format:
    # Title                   document title
    ## Section / ### Sub      (sub)sections between frames
    **Frame title**           opens a frame with a title
    * item / - item           itemize entries
    1. item                   enumerate entries
    ![](figure.pdf)           includegraphics inside a figure
    :author: / :date: / ...   metadata and theme directives
    (blank line)              closes the current frame
    anything else             passed through to LaTeX as-is

Usage:
    beamdown inputdir/ outputdir/ --inputFile talk.md

    The converted deck is written to outputdir/talk.tex.

Examples:
    # Basic conversion
    beamdown . output/ --inputFile talk.md

    # Custom output name, no title slide
    beamdown . output/ --inputFile talk.md --outputFile slides.tex --no-titlepage

    # Verbose output with per-line trace
    beamdown . output/ --inputFile talk.md -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Compiler, ConversionError, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  _                              _
 | |__   ___  __ _ _ __ ___   __| | _____      ___ __
 | '_ \ / _ \/ _` | '_ ` _ \ / _` |/ _ \ \ /\ / / '_ \
 | |_) |  __/ (_| | | | | | | (_| | (_) \ V  V /| | | |
 |_.__/ \___|\__,_|_| |_| |_|\__,_|\___/ \_/\_/ |_| |_|

  Markdown to LaTeX beamer converter
"""

# Define CLI arguments
parser = ArgumentParser(
    description="beamdown - Markdown to LaTeX beamer converter",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input markdown file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default="",
    type=str,
    help="Output .tex file (relative to outputdir). Defaults to the input name with .tex",
)

parser.add_argument(
    "--no-titlepage",
    dest="titlepage",
    action="store_false",
    default=appsettings.titlepage,
    help="Do not emit a title slide when the document body opens",
)

parser.add_argument(
    "--strict",
    action="store_true",
    default=appsettings.strict_mode,
    help="Fail on unsupported features (e.g. inline image captions) instead of warning",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markdown source
            - texOutputFile: Path of the .tex file to write
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = Path(state.inputdir or ".") / state.inputFile

    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    output_name = state.outputFile or appsettings.outputName_make(state.inputFile)
    state.texOutputFile = Path(state.outputdir or ".") / output_name
    state.texOutputFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.texOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the markdown source into lines.

    Lines keep their terminators; the converter relies on them.

    Returns:
        ProgramState with added field:
            - sourceLines: List[str] of source lines

    Exits:
        1 if the file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        with state.inputSourceFile.open("r", encoding="utf-8") as source:
            state.sourceLines = source.readlines()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.sourceLines)} lines from {state.inputSourceFile.name}", level=2)
    return state


def beamer_compile(inputstate: ProgramState) -> ProgramState:
    """
    Convert the source lines to a beamer document on disk.

    Returns:
        ProgramState with added field:
            - compileResult: Dict containing:
                - status: bool (conversion success)
                - output_file: str (path to the generated .tex)
                - line_count: int (lines processed)
                - frame_count: int (frames opened)
                - diagnostics: List[str] (non-fatal warnings)

    Exits:
        1 if sourceLines is None or a line is malformed
    """

    state = inputstate.copy()

    LOG("Converting to beamer...", level=1)

    if state.sourceLines is None:
        print("Error: No source lines available", file=sys.stderr)
        sys.exit(1)

    try:
        with state.texOutputFile.open("w", encoding="utf-8") as sink:
            compiler = Compiler(sink, titlepage=state.titlepage, strict=state.strict)
            state.compileResult = compiler.compile(state.sourceLines)
    except ConversionError as e:
        print(f"Conversion error: {e}", file=sys.stderr)
        sys.exit(1)

    state.compileResult["output_file"] = str(state.texOutputFile)
    LOG(f"Conversion complete: {state.compileResult['frame_count']} frames", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display conversion results and usage instructions to user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if compileResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.compileResult:
        print("Error: Conversion failed", file=sys.stderr)
        sys.exit(1)

    if state.verbosity >= 1:
        LOG("\n✓ Conversion successful!", level=1)
        LOG(f"  Output: {state.compileResult['output_file']}", level=1)
        LOG(f"  Frames: {state.compileResult['frame_count']}", level=1)
        if state.compileResult["diagnostics"]:
            LOG(f"  Warnings: {len(state.compileResult['diagnostics'])}", level=1)
        LOG("\nTo build:", level=1)
        LOG(f"  pdflatex {state.texOutputFile.name}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="beamdown - Markdown to LaTeX beamer converter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert a markdown outline to a beamer deck.

    Orchestrates the full conversion pipeline:
        1. env_check: Validate paths and environment
        2. source_read: Read the markdown source into lines
        3. beamer_compile: Convert lines to LaTeX and write the .tex file
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - inputFile: str - Input markdown filename
            - outputFile: str - Output .tex filename (optional)
            - titlepage: bool - Emit a title slide
            - strict: bool - Fail on unsupported features
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing the markdown source
        outputdir: Directory where the .tex file will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_read, beamer_compile, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
