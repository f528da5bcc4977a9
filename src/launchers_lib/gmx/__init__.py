# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Launcher of GROMACS simulations from prepared run input (.tpr) files.
"""

from .launcher import GmxLauncher

__all__ = ["GmxLauncher"]
