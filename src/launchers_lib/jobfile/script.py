# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from launchers_lib.core.config import CFG
from launchers_lib.core.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SubmissionScript:
    """
    A generated job file: scheduler directives, environment setup, and commands.
    """

    # Name of the job
    name: str

    # Scheduler directive lines
    header: list[str] = field(default_factory=list)

    # Module unload/load lines
    environment: list[str] = field(default_factory=list)

    # Shell commands of the computation, in execution order
    body: list[str] = field(default_factory=list)

    SHEBANG: ClassVar[str] = "#!/bin/bash"

    def render(self) -> str:
        """
        Render the job file.

        The shebang and the header come first, followed by the environment
        setup and the body, sections separated by a blank line. The output
        depends only on the content of the script.

        Returns:
            str: Content of the job file.
        """
        sections = [[SubmissionScript.SHEBANG, *self.header], self.environment, self.body]
        return "\n\n".join("\n".join(section) for section in sections if section) + "\n"

    def fileName(self) -> str:
        """Return the name of the job file."""
        return f"{self.name}{CFG.suffixes.job}"

    def write(self, directory: Path) -> Path:
        """
        Write the job file into the given directory.

        An existing file of the same name is overwritten.

        Args:
            directory (Path): Directory to write the job file to.

        Returns:
            Path: Path to the written job file.
        """
        path = directory / self.fileName()
        path.write_text(self.render())
        logger.debug(f"Job file written to '{path}'.")
        return path
