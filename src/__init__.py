"""
beamdown - Markdown to LaTeX beamer converter

Turns a plain-text, Markdown-like outline into a beamer slide deck.
"""

__version__ = "1.0.0"

from .lib import Compiler, DirectiveRegistry, ConversionError, LOG, state_connectToLogger

__all__ = ["Compiler", "DirectiveRegistry", "ConversionError", "LOG", "state_connectToLogger", "__version__"]
