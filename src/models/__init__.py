"""
Models package for beamdown

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .lines import (
    Location,
    Environment,
    SpecialToken,
    LineKind,
    ClassifiedLine,
    ImageDirective,
)
from .directives import DirectiveSpec, DIRECTIVE_PRIORITY

__all__ = [
    "ProgramState",
    "pipeline",
    "Location",
    "Environment",
    "SpecialToken",
    "LineKind",
    "ClassifiedLine",
    "ImageDirective",
    "DirectiveSpec",
    "DIRECTIVE_PRIORITY",
]
