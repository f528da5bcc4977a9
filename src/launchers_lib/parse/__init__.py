# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Command-line parsing shared by all launchers.

Every launcher describes its flags declaratively as a table of `Flag` objects
(name, arity, target field). A single `FlagParser` consumes such a table,
scans the leading flag tokens of the command line, and returns the collected
options together with the positional tokens that follow them.
"""

from .flags import COMMON_FLAGS, HELP_FLAG, VARIADIC, Flag
from .parser import FlagParser, ParsedArguments

__all__ = [
    "COMMON_FLAGS",
    "HELP_FLAG",
    "VARIADIC",
    "Flag",
    "FlagParser",
    "ParsedArguments",
]
