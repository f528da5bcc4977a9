# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
The launch workflow shared by all launchers.

`Launcher` drives every invocation: the command line is parsed using the
launcher's flag table, each input is resolved into a `JobRequest` using the
`Resolver`, a submission script is generated, and the script is submitted
(or only written in dry-run mode). Inputs are processed independently; an
invalid input is reported and skipped without aborting the others.
"""

from .launcher import Launcher
from .resolver import Resolver

__all__ = ["Launcher", "Resolver"]
