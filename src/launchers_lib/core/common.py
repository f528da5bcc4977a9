# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the launchers.

This module provides helpers for YAML I/O, path expansion, creation of the
per-user directories, atomic file replacement, and user prompts.
"""

import os
import tempfile
from functools import lru_cache
from pathlib import Path

import readchar
import yaml
from rich.live import Live
from rich.text import Text

from .config import CFG, Config
from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_dumper() -> type[yaml.Dumper]:
    """Return the fastest available YAML dumper (CDumper if possible)."""
    try:
        from yaml import CDumper as Dumper  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CDumper.")
    except ImportError:
        from yaml import Dumper

        logger.debug("Loaded default YAML dumper.")
    return Dumper


@lru_cache(maxsize=1)
def load_yaml_loader() -> type[yaml.SafeLoader]:
    """Return the fastest available safe YAML loader (CSafeLoader if possible)."""
    try:
        from yaml import (
            CSafeLoader as SafeLoader,  # ty: ignore[possibly-missing-import]
        )

        logger.debug("Loaded YAML CLoader.")
    except ImportError:
        from yaml import SafeLoader

        logger.debug("Loaded default YAML loader.")

    return SafeLoader


def expand_path(path: str | Path) -> Path:
    """
    Expand `~` and environment variables in a path.

    Args:
        path (str | Path): Path possibly containing `~` or `$VARIABLE` references.

    Returns:
        Path: The expanded path.
    """
    return Path(os.path.expandvars(os.path.expanduser(str(path))))


def messages_dir(cfg: Config = CFG) -> Path:
    """Return the directory collecting stdout and stderr of submitted jobs."""
    return expand_path(cfg.paths.messages_dir)


def jobs_dir(cfg: Config = CFG) -> Path:
    """Return the directory into which submitted job files are archived."""
    return expand_path(cfg.paths.jobs_dir)


def ensure_directories(cfg: Config = CFG) -> None:
    """
    Create the messages and jobs directories if they do not exist yet.

    Existing directories are left untouched, so concurrent invocations are safe.
    """
    for directory in (messages_dir(cfg), jobs_dir(cfg)):
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured directory '{directory}'.")


def atomic_write(file: Path, content: str) -> None:
    """
    Replace the content of a file without ever leaving it partially written.

    The content is written to a temporary file in the same directory which is
    then renamed over the target. File permissions of an existing target are kept.

    Args:
        file (Path): The file to write.
        content (str): The new content of the file.
    """
    fd, tmp_name = tempfile.mkstemp(
        dir=file.parent, prefix=f".{file.name}.", suffix=".tmp"
    )
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w") as f:
            f.write(content)
        if file.exists():
            os.chmod(tmp, file.stat().st_mode)
        tmp.replace(file)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def yes_or_no_prompt(prompt: str) -> bool:
    """
    Display an interactive yes/no prompt to the user and return the selection.

    The prompt highlights the pressed key ('y' in green for yes, 'N' in red for no)
    and defaults to 'No' if the user presses any key other than 'y'.

    Args:
        prompt (str): The text to display as the question.

    Returns:
        bool: True if the user selects 'yes' (presses 'y'), False otherwise.
    """
    prompt = f"   {prompt} "
    text = (
        Text("PROMPT", style="magenta")
        + Text(prompt, style="default")
        + Text("[y/N]", style="bold default")
    )

    with Live(text, refresh_per_second=1) as live:
        key = readchar.readkey().lower()

        # highlight the pressed key
        if key == "y":
            choice = (
                Text("[", style="bold default")
                + Text("y", style="bold green")
                + Text("/N]", style="bold default")
            )
        else:
            choice = (
                Text("[y/", style="bold default")
                + Text("N", style="bold red")
                + Text("]", style="bold default")
            )

        live.update(
            Text("PROMPT", style="magenta") + Text(prompt, style="default") + choice
        )

    return key == "y"
