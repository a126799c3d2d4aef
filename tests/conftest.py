"""Shared fixtures for beamdown tests."""

import io

import pytest

from beamdown.config import AppSettings
from beamdown.lib.compiler import Compiler


@pytest.fixture
def settings():
    """Default settings, isolated from BEAMDOWN_* variables and .env files."""
    return AppSettings(_env_file=None)


@pytest.fixture
def sink():
    """In-memory output sink."""
    return io.StringIO()


@pytest.fixture
def compiler(sink, settings):
    """Compiler writing to the in-memory sink, preamble not yet written."""
    return Compiler(sink, settings=settings)


@pytest.fixture
def convert(settings):
    """Convert a source string and return the full LaTeX output."""

    def _convert(source, **kwargs):
        out = io.StringIO()
        Compiler(out, settings=settings, **kwargs).compile(source.splitlines(keepends=True))
        return out.getvalue()

    return _convert
