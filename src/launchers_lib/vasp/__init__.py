# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Launcher of VASP calculations prepared in a directory.
"""

from .launcher import VaspLauncher

__all__ = ["VaspLauncher"]
