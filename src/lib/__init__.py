"""
beamdown - Markdown to LaTeX beamer converter

Converts a restricted Markdown dialect into a beamer slide deck.
"""

__version__ = "1.0.0"

from .compiler import Compiler
from .directives import DirectiveRegistry
from .classifier import line_classify
from .errors import ConversionError
from .log import LOG, WARN, state_connectToLogger

__all__ = [
    "Compiler",
    "DirectiveRegistry",
    "line_classify",
    "ConversionError",
    "LOG",
    "WARN",
    "state_connectToLogger",
    "__version__",
]
