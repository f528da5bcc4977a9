# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout the launchers.

Errors raised while reading the command line (`NoArgumentsError`,
`UnknownOptionError`, `MissingValueError`, `InvalidValueError`) are fatal and
terminate the launcher before any input file is processed. Errors tied to a
single input file (`InvalidExtensionError`, `MissingFileError`,
`UnreadableFileError`, `InvalidNameError`) only cause that file to be skipped.
"""

from .config import CFG


class LauncherError(Exception):
    """Common exception type for all recoverable launcher errors."""

    exit_code = CFG.exit_codes.default


class NoArgumentsError(LauncherError):
    """Raised when the launcher is invoked without any arguments."""

    pass


class UnknownOptionError(LauncherError):
    """Raised when an unrecognized flag is encountered on the command line."""

    def __init__(self, option: str):
        super().__init__(f"Unknown option '{option}'. Use -h for help.")
        self.option = option


class MissingValueError(LauncherError):
    """Raised when a flag requiring a value is not followed by one."""

    def __init__(self, option: str):
        super().__init__(f"Option '{option}' requires a value. Use -h for help.")
        self.option = option


class InvalidValueError(LauncherError):
    """Raised when a flag value cannot be converted to the required type."""

    pass


class InvalidExtensionError(LauncherError):
    """Raised when an input file does not have an extension accepted by the launcher."""

    pass


class MissingFileError(LauncherError):
    """Raised when an input file or a required companion file does not exist."""

    pass


class UnreadableFileError(LauncherError):
    """Raised when an input file exists but cannot be read or decoded."""

    pass


class InvalidNameError(LauncherError):
    """Raised when a job name cannot be used in scheduler directives."""

    pass


class HelpRequested(Exception):
    """
    Raised by the argument parser when help was requested.

    Not an error: the launcher prints its usage and exits successfully.
    """

    pass
