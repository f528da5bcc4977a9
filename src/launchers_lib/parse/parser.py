# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field

from launchers_lib.core.click_format import GNUHelpFormatter
from launchers_lib.core.error import (
    HelpRequested,
    InvalidValueError,
    MissingValueError,
    NoArgumentsError,
    UnknownOptionError,
)
from launchers_lib.core.logger import get_logger

from .flags import HELP_FLAG, Flag

logger = get_logger(__name__)


@dataclass
class ParsedArguments:
    """
    Result of parsing a launcher command line.
    """

    # Values of the flags that were specified, keyed by `Flag.dest`
    options: dict[str, object] = field(default_factory=dict)

    # Tokens following the last flag
    positional: list[str] = field(default_factory=list)

    def get(self, dest: str, default: object = None) -> object:
        """Return the value stored for `dest` or `default` if the flag was not used."""
        return self.options.get(dest, default)

    def isSet(self, dest: str) -> bool:
        """Return True if the flag stored under `dest` was used."""
        return dest in self.options


class FlagParser:
    """
    Generic parser of launcher command lines driven by a table of flags.
    """

    def __init__(self, flags: list[Flag], requires_arguments: bool = True):
        """
        Initialize the parser.

        Args:
            flags (list[Flag]): All flags understood by the launcher.
            requires_arguments (bool): Whether an empty command line is an error.
        """
        self._flags = flags
        self._requires_arguments = requires_arguments
        self._lookup: dict[str, Flag] = {
            name: flag for flag in flags for name in flag.names
        }
        logger.debug(f"Known flags for FlagParser: {sorted(self._lookup)}.")

    def parse(self, tokens: list[str] | tuple[str, ...]) -> ParsedArguments:
        """
        Parse the command line.

        Leading tokens starting with '-' are flags. Each recognized flag consumes
        itself and its values. The first token not starting with '-' terminates
        the scanning; it and all following tokens are returned as positional.

        Args:
            tokens (list[str] | tuple[str, ...]): The command-line tokens (without program name).

        Returns:
            ParsedArguments: The collected options and positional tokens.

        Raises:
            HelpRequested: If -h/--help is found among the flags.
            NoArgumentsError: If no tokens were provided and the launcher requires some.
            UnknownOptionError: If an unrecognized flag is encountered.
            MissingValueError: If a flag is not followed by its value.
            InvalidValueError: If a value cannot be converted to the flag's type.
        """
        tokens = list(tokens)
        if not tokens and self._requires_arguments:
            raise NoArgumentsError("No input arguments. Use -h for help.")

        # help takes precedence over any other error
        if self._helpRequested(tokens):
            raise HelpRequested()

        parsed = ParsedArguments()
        i = 0
        while i < len(tokens) and FlagParser._isFlagToken(tokens[i]):
            token = tokens[i]
            name, inline_value = FlagParser._splitInline(token)

            if not (flag := self._lookup.get(name)):
                raise UnknownOptionError(token)
            i += 1

            if not flag.takesValue():
                if inline_value is not None:
                    raise InvalidValueError(f"Option '{name}' does not take a value.")
                parsed.options[flag.dest] = True
                continue

            if inline_value is not None:
                values = [inline_value]
            elif flag.isVariadic():
                values = []
                while i < len(tokens) and not FlagParser._isFlagToken(tokens[i]):
                    values.append(tokens[i])
                    i += 1
            elif i < len(tokens):
                values = [tokens[i]]
                i += 1
            else:
                values = []

            if not values:
                raise MissingValueError(name)

            converted = [FlagParser._convert(flag, name, v) for v in values]
            if flag.isVariadic():
                previous = parsed.options.get(flag.dest, [])
                parsed.options[flag.dest] = previous + converted
            else:
                parsed.options[flag.dest] = converted[0]

        parsed.positional = tokens[i:]
        logger.debug(f"Parsed arguments: {parsed}.")
        return parsed

    def usage(self, prog: str, args: str, description: str) -> str:
        """
        Render the usage block of the launcher.

        Args:
            prog (str): Name of the program.
            args (str): Description of the positional arguments (e.g., '[OPTIONS] FILE...').
            description (str): Text describing what the launcher does.

        Returns:
            str: The formatted usage block.
        """
        formatter = GNUHelpFormatter(
            headers_color="yellow", options_color="bright_blue"
        )
        formatter.write_usage(prog, args)
        formatter.write_paragraph()
        formatter.write_text(description)
        formatter.write_paragraph()
        with formatter.section("Options"):
            formatter.write_dl([(flag.formatTerm(), flag.help) for flag in self._flags])

        return formatter.getvalue()

    def _helpRequested(self, tokens: list[str]) -> bool:
        """
        Check whether the help flag is present among the leading flags.

        Unknown flags are skipped so that help can be printed even for
        an otherwise invalid command line.
        """
        i = 0
        while i < len(tokens) and FlagParser._isFlagToken(tokens[i]):
            name, inline_value = FlagParser._splitInline(tokens[i])
            i += 1
            if name in HELP_FLAG.names:
                return True

            flag = self._lookup.get(name)
            if not flag or not flag.takesValue() or inline_value is not None:
                continue

            if flag.isVariadic():
                while i < len(tokens) and not FlagParser._isFlagToken(tokens[i]):
                    i += 1
            else:
                i += 1

        return False

    @staticmethod
    def _isFlagToken(token: str) -> bool:
        return token.startswith("-")

    @staticmethod
    def _splitInline(token: str) -> tuple[str, str | None]:
        """
        Split a '--flag=value' token into the flag name and its value.
        """
        if token.startswith("--") and "=" in token:
            name, value = token.split("=", 1)
            return name, value
        return token, None

    @staticmethod
    def _convert(flag: Flag, name: str, value: str) -> object:
        try:
            return flag.kind(value)
        except ValueError as e:
            raise InvalidValueError(
                f"Invalid value '{value}' for option '{name}'."
            ) from e
