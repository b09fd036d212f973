"""Pytest configuration and fixtures for smart-cmdline tests"""
from enum import Enum

import pytest

from smart_cmdline.parser import CommandLineOptions


class Color(Enum):
    Red = 1
    Green = 2
    Blue = 3


@pytest.fixture
def color_enum():
    """Enumeration used for enum-typed options"""
    return Color


@pytest.fixture
def options():
    """Empty parser instance"""
    return CommandLineOptions()


@pytest.fixture
def example_options():
    """Registry from the documented example: input, verbose flag, repeatable tag"""
    opts = CommandLineOptions()
    opts.add_required("input", str, ["-i", "--input"], "File to read")
    opts.add_optional("verbose", bool, False, "-v", "Chatty output")
    opts.add_repeatable("tag", int, "-t", "Tag id, may repeat")
    return opts


@pytest.fixture
def positional_options():
    """Two positional options followed by a repeatable positional tail"""
    opts = CommandLineOptions()
    opts.add_required("source", str, help="Source path")
    opts.add_optional("count", int, 1, help="How many copies")
    opts.add_optional("force", bool, False, ["-f", "--force"], "Overwrite")
    opts.add_repeatable("rest", str, help="Everything else")
    return opts
