# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Launcher of Gaussian calculations.

Gaussian input files carry their own resource directives (`%NProcShared`,
`%Mem`). The launcher reads them, resolves the final resources (explicit
flags take precedence over the directives), and rewrites the directives
in the input file so that the calculation uses exactly the resources
requested from the batch system.

Note that the input file is modified in place (atomically) every time it is
passed to the launcher, even in dry-run mode.
"""

from .input import GaussianInput
from .launcher import GaussianLauncher

__all__ = ["GaussianInput", "GaussianLauncher"]
