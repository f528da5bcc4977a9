# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for the launchers.

This module defines dataclasses representing all configurable aspects of the
launchers, including per-user directories, environment variables, exit codes,
the default resources requested for every job, and the executables and
environment modules used for each supported program.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class FileSuffixes:
    """File suffixes used by the launchers."""

    # Suffix for generated submission scripts.
    job: str = ".job"
    # Suffix for captured stdout/stderr of submitted jobs.
    message: str = ".msg"


@dataclass
class PathSettings:
    """Per-user directories and files. `~` and environment variables are expanded on use."""

    # Directory collecting stdout and stderr of submitted jobs.
    messages_dir: str = "~/msg"
    # Directory into which submitted job files are archived.
    jobs_dir: str = "~/jobs"
    # YAML file storing defaults set using `launchers_def`.
    defaults_file: str = "~/.config/launchers/defaults.yaml"


@dataclass
class EnvironmentVariables:
    """Environment variable names used by the launchers."""

    # Enables debug mode.
    debug_mode: str = "LAUNCHERS_DEBUG"
    # Name of the batch system to use.
    batch_system: str = "LAUNCHERS_BATCH_SYSTEM"
    # Explicit path to the configuration file.
    config: str = "LAUNCHERS_CONFIG"


@dataclass
class DefaultResources:
    """Resources requested for a job unless specified otherwise."""

    # Number of computing nodes.
    nodes: int | None = 1
    # Number of CPU cores per node.
    cores: int | None = 1
    # Memory per node.
    memory: str | None = "1000MB"
    # Number of GPUs per node.
    gpus: int | None = 0
    # Queue (partition) to submit to. Batch system default if not set.
    queue: str | None = None
    # Account to charge the job to.
    account: str | None = None
    # Explicit list of nodes to run the job on.
    nodelist: str | None = None


@dataclass
class ProgramSettings:
    """Executable and environment modules of a program."""

    # Name of (or path to) the executable.
    executable: str = ""
    # Environment modules to unload before loading `modules_load`.
    modules_unload: list[str] = field(default_factory=list)
    # Environment modules to load.
    modules_load: list[str] = field(default_factory=list)


@dataclass
class GromacsSettings(ProgramSettings):
    """Settings for GROMACS jobs."""

    executable: str = "gmx"
    modules_load: list[str] = field(default_factory=lambda: ["gromacs"])
    # Number of warnings tolerated by grompp.
    maxwarn: int = 0
    # Additional options passed to every mdrun invocation.
    mdrun_options: str = ""
    # Default coordinate file for the replicater.
    coord: str = "conf.gro"
    # Default topology file for the replicater.
    topol: str = "topol.top"
    # MPI-enabled executable used when running replicas with `-multidir`.
    mpi_executable: str = "gmx_mpi"
    # Command used to start the MPI-enabled executable.
    mpi_launcher: str = "srun"


@dataclass
class GaussianSettings(ProgramSettings):
    """Settings for Gaussian jobs."""

    executable: str = "g16"
    modules_load: list[str] = field(default_factory=lambda: ["gaussian/16"])
    # Executable used with `--g09`.
    legacy_executable: str = "g09"
    # Modules loaded with `--g09` instead of `modules_load`.
    legacy_modules_load: list[str] = field(default_factory=lambda: ["gaussian/09"])
    # Module loaded with `--nbo`.
    nbo_module: str = "nbo"
    # Utility converting checkpoint files to formatted checkpoint files.
    formchk: str = "formchk"
    # Scratch directory for Gaussian.
    scratch_dir: str = "${TMPDIR:-/tmp}"


@dataclass
class OrcaSettings(ProgramSettings):
    """Settings for ORCA jobs."""

    executable: str = "orca"
    modules_load: list[str] = field(default_factory=lambda: ["orca"])


@dataclass
class VaspSettings(ProgramSettings):
    """Settings for VASP jobs."""

    executable: str = "vasp_std"
    modules_load: list[str] = field(default_factory=lambda: ["vasp"])
    # Command used to start the parallel run.
    mpi_launcher: str = "srun"
    # Files that must be present in the calculation directory.
    required_files: list[str] = field(
        default_factory=lambda: ["INCAR", "POSCAR", "KPOINTS", "POTCAR"]
    )


@dataclass
class ScriptSettings(ProgramSettings):
    """Settings for generic script jobs."""

    executable: str = "bash"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used in logs.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of the launchers.
    default: int = 1
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration of the launchers."""

    suffixes: FileSuffixes = field(default_factory=FileSuffixes)
    paths: PathSettings = field(default_factory=PathSettings)
    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    defaults: DefaultResources = field(default_factory=DefaultResources)
    gromacs: GromacsSettings = field(default_factory=GromacsSettings)
    gaussian: GaussianSettings = field(default_factory=GaussianSettings)
    orca: OrcaSettings = field(default_factory=OrcaSettings)
    vasp: VaspSettings = field(default_factory=VaspSettings)
    script: ScriptSettings = field(default_factory=ScriptSettings)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the batch system to use. Empty means environment variable or auto-detection.
    batch_system: str = ""

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read launchers config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("LAUNCHERS_CONFIG")) else None,
            # 2. Current working directory
            Path.cwd() / "launchers_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "launchers"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration of the launchers.
CFG = Config.load()
