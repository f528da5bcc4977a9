# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the computational-chemistry job launchers.

This package turns short command lines into batch-system job files for
GROMACS, Gaussian, ORCA, VASP, and generic bash scripts and submits them.
It defines the abstraction for batch systems with Slurm and SGE backends,
a table-driven command-line parser shared by all launchers, resolution of
job names and resources (command line, input-file directives, and user
defaults), generation of deterministic job files, and their submission.
"""

from .launchers import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "batch",
    "core",
    "defaults",
    "gaussian",
    "gmx",
    "jobfile",
    "launch",
    "orca",
    "parse",
    "properties",
    "replicate",
    "script",
    "submit",
    "vasp",
]
