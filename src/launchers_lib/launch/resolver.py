# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import re
from pathlib import Path

from launchers_lib.core.error import InvalidNameError
from launchers_lib.core.logger import get_logger
from launchers_lib.properties.resources import Resources

logger = get_logger(__name__)


class Resolver:
    """
    Resolves names and resources of jobs.

    Resources are merged with the following precedence:
        1. Values specified explicitly on the command line
        2. Values embedded in the input file (e.g., Gaussian `%Mem`)
        3. Default values
    """

    def __init__(self, defaults: Resources):
        """
        Initialize the resolver.

        Args:
            defaults (Resources): Default resources used for unset fields.
        """
        self._defaults = defaults

    def resolveResources(
        self, explicit: Resources, embedded: Resources | None = None
    ) -> Resources:
        """
        Merge explicit, embedded, and default resources.

        Args:
            explicit (Resources): Resources specified on the command line.
            embedded (Resources | None): Resources read from the input file, if any.

        Returns:
            Resources: The fully resolved resources.
        """
        resolved = Resources.mergeResources(
            explicit, embedded or Resources(), self._defaults
        )
        logger.debug(f"Resolved resources: {resolved}.")
        return resolved

    @staticmethod
    def resolveName(candidate: str) -> str:
        """
        Validate a job name.

        Args:
            candidate (str): The proposed job name.

        Returns:
            str: The validated name.

        Raises:
            InvalidNameError: If the name is empty, contains whitespace, or starts with a digit.
        """
        if not candidate:
            raise InvalidNameError("Job name is empty.")
        if re.search(r"\s", candidate):
            raise InvalidNameError(f"Job name '{candidate}' contains whitespace.")
        if candidate[0].isdigit():
            raise InvalidNameError(
                f"Job name '{candidate}' starts with a digit which is not allowed by the batch system."
            )
        return candidate

    @staticmethod
    def nameFromFile(path: Path) -> str:
        """Return the name of a file without its extension."""
        return path.stem

    @staticmethod
    def nameFromDirectory(path: Path) -> str:
        """Return the name of a directory."""
        return path.resolve().name
