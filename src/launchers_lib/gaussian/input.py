# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import re
from pathlib import Path
from typing import Self

from launchers_lib.core.common import atomic_write
from launchers_lib.core.error import MissingFileError, UnreadableFileError
from launchers_lib.core.logger import get_logger
from launchers_lib.properties.resources import Resources

logger = get_logger(__name__)


class GaussianInput:
    """
    Link 0 directives of a Gaussian input file.
    """

    # separates the individual steps of a multi-step input file
    LINK_SEPARATOR = "--link1--"

    # directives replaced by the canonical block
    RESOURCE_DIRECTIVES = ("nprocshared", "mem")

    _DIRECTIVE_PATTERN = re.compile(r"^\s*%(\w+)\s*=\s*(.*?)\s*$")

    def __init__(self, path: Path, content: str):
        self._path = path
        self._content = content

    @classmethod
    def fromFile(cls, path: Path) -> Self:
        """
        Read a Gaussian input file.

        Raises:
            MissingFileError: If the file does not exist.
            UnreadableFileError: If the file cannot be read or is not valid text.
        """
        if not path.is_file():
            raise MissingFileError(f"File '{path}' does not exist.")

        try:
            # keep CRLF line endings intact
            with open(path, newline="") as file:
                content = file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise UnreadableFileError(f"Could not read file '{path}': {e}.") from e

        return cls(path, content)

    def getContent(self) -> str:
        return self._content

    def directives(self) -> dict[str, str]:
        """
        Return directives of the first link section keyed by their lower-cased name.

        Later occurrences of a directive override earlier ones.
        """
        directives = {}
        for line in self._content.splitlines():
            if GaussianInput._isSeparator(line):
                break
            if match := GaussianInput._DIRECTIVE_PATTERN.match(line):
                directives[match.group(1).lower()] = match.group(2)

        logger.debug(f"Directives found in '{self._path}': {directives}.")
        return directives

    def embeddedResources(self) -> Resources:
        """
        Return the resources declared by `%NProcShared` and `%Mem`.

        Values that are not valid are ignored with a warning.
        """
        directives = self.directives()

        cores = None
        if (nproc := directives.get("nprocshared")) is not None:
            try:
                cores = int(nproc)
            except ValueError:
                logger.warning(
                    f"Ignoring invalid %NProcShared value '{nproc}' in '{self._path}'."
                )

        return Resources(cores=cores, memory=directives.get("mem") or None)

    def render(self, cores: int, memory: str, checkpoint: str | None = None) -> str:
        """
        Return the content of the input file with the canonical directive block.

        `%NProcShared` and `%Mem` lines of the first link section are removed and
        the block is inserted at the top of the file and after every `--Link1--` line.
        Directives of the following link sections are kept as they are.

        Args:
            cores (int): Number of cores for `%NProcShared`.
            memory (str): Memory for `%Mem`.
            checkpoint (str | None): If set, `%Chk` is added to the block.

        Returns:
            str: The new content. The original is not modified.
        """
        block = [f"%NProcShared={cores}", f"%Mem={memory}"]
        if checkpoint:
            block.append(f"%Chk={checkpoint}")

        lines = list(block)
        first_section = True
        for line in self._content.splitlines():
            if GaussianInput._isSeparator(line):
                first_section = False
                lines.append(line)
                lines.extend(block)
                continue

            if first_section and (match := GaussianInput._DIRECTIVE_PATTERN.match(line)):
                if match.group(1).lower() in GaussianInput.RESOURCE_DIRECTIVES:
                    continue

            lines.append(line)

        newline = "\r\n" if "\r\n" in self._content else "\n"
        return newline.join(lines) + newline

    def rewrite(self, cores: int, memory: str, checkpoint: str | None = None) -> bool:
        """
        Replace the input file with its rendered content.

        This modifies the user's file. The new content is written atomically
        and the file is left untouched if the content does not change.

        Returns:
            bool: True if the file was modified.
        """
        content = self.render(cores, memory, checkpoint)
        if content == self._content:
            logger.debug(f"Directives in '{self._path}' are up to date.")
            return False

        atomic_write(self._path, content)
        self._content = content
        logger.debug(f"Rewrote directives in '{self._path}'.")
        return True

    @staticmethod
    def _isSeparator(line: str) -> bool:
        return line.strip().lower() == GaussianInput.LINK_SEPARATOR
