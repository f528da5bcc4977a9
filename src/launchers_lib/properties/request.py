# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Job requests constructed by the launchers.

A `JobRequest` is built once per input file (or once per replica for
directory-scoped launchers), consumed to generate exactly one submission
script, and discarded.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .resources import Resources


class Mode(Enum):
    """
    What happens with the generated submission script.
    """

    SUBMIT = 1
    DRY_RUN = 2

    def __str__(self):
        return self.name.lower().replace("_", " ")


@dataclass
class JobRequest:
    """
    Everything needed to generate a submission script for one job.
    """

    # Name of the job; also the name of the generated job file
    name: str

    # Fully resolved resources
    resources: Resources

    # Directory the job is executed in
    work_dir: Path

    # Ordered input files of the job
    input_files: list[Path] = field(default_factory=list)

    # Companion files, keyed by their role (e.g., topology, index, checkpoint)
    aux_files: dict[str, Path] = field(default_factory=dict)

    # Whether the job is submitted or only written
    mode: Mode = Mode.SUBMIT

    @property
    def input_file(self) -> Path:
        """The first (for most launchers the only) input file."""
        return self.input_files[0]

    def isDryRun(self) -> bool:
        """Return True if the job should not be submitted."""
        return self.mode == Mode.DRY_RUN
