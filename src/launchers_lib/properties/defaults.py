# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Default resources requested for every job.

Defaults are assembled from three layers, later layers taking precedence:
the built-in values, the `[defaults]` table of the configuration file, and
the user defaults file managed by `launchers_def`.
"""

from dataclasses import asdict
from pathlib import Path
from typing import Self

import yaml

from launchers_lib.core.common import (
    atomic_write,
    expand_path,
    load_yaml_dumper,
    load_yaml_loader,
)
from launchers_lib.core.config import CFG, Config
from launchers_lib.core.error import LauncherError
from launchers_lib.core.logger import get_logger

from .resources import Resources

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()
Dumper: type[yaml.Dumper] = load_yaml_dumper()


class Defaults:
    """
    Access to the default resources and to the user defaults file.
    """

    # Variables that can be set using `launchers_def`.
    ALLOWED_VARIABLES = ("nodes", "cores", "memory", "gpus", "queue", "account")

    def __init__(self, file: Path, cfg: Config = CFG):
        """
        Initialize the defaults.

        Args:
            file (Path): Path to the user defaults file. Does not have to exist.
            cfg (Config): Configuration providing the configured defaults.
        """
        self._file = file
        self._cfg = cfg

    @classmethod
    def fromConfig(cls, cfg: Config = CFG) -> Self:
        """
        Create Defaults using the defaults file specified in the configuration.
        """
        return cls(expand_path(cfg.paths.defaults_file), cfg)

    def getFile(self) -> Path:
        """Get path to the user defaults file."""
        return self._file

    def load(self) -> Resources:
        """
        Return the effective default resources.

        Returns:
            Resources: User defaults merged over the configured defaults.

        Raises:
            LauncherError: If the user defaults file exists but cannot be parsed.
        """
        return Resources.mergeResources(
            Resources.fromDict(self.stored()),
            Resources.fromDict(asdict(self._cfg.defaults)),
        )

    def stored(self) -> dict[str, object]:
        """
        Return the values stored in the user defaults file.

        Returns:
            dict[str, object]: Stored values. Empty if the file does not exist.

        Raises:
            LauncherError: If the file cannot be parsed or does not contain a mapping.
        """
        if not self._file.is_file():
            logger.debug(f"No user defaults file '{self._file}'.")
            return {}

        try:
            with self._file.open() as f:
                data = yaml.load(f, Loader=SafeLoader)
        except yaml.YAMLError as e:
            raise LauncherError(
                f"Could not parse the defaults file '{self._file}': {e}."
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise LauncherError(f"Invalid defaults file '{self._file}'.")

        logger.debug(f"Loaded user defaults from '{self._file}': {data}.")
        return data

    def set(self, variable: str, value: str) -> None:
        """
        Store a default value for the given variable in the user defaults file.

        Args:
            variable (str): Name of the variable. Must be one of `ALLOWED_VARIABLES`.
            value (str): The new default value.

        Raises:
            LauncherError: If the variable is not allowed or the value is invalid.
        """
        if variable not in Defaults.ALLOWED_VARIABLES:
            raise LauncherError(
                f"Variable '{variable}' not allowed. Available variables: {', '.join(Defaults.ALLOWED_VARIABLES)}."
            )

        # validates and converts the value
        converted = getattr(Resources(**{variable: value}), variable)

        data = self.stored()
        data[variable] = converted

        self._file.parent.mkdir(parents=True, exist_ok=True)
        atomic_write(
            self._file,
            yaml.dump(data, default_flow_style=False, sort_keys=False, Dumper=Dumper),
        )
        logger.debug(f"Stored default {variable}={converted} in '{self._file}'.")

    def reset(self) -> bool:
        """
        Remove the user defaults file.

        Returns:
            bool: True if a file was removed, False if there was nothing to remove.
        """
        if not self._file.is_file():
            return False

        self._file.unlink()
        return True
