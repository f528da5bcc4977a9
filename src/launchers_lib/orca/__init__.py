# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Launcher of ORCA calculations.
"""

from .launcher import OrcaLauncher

__all__ = ["OrcaLauncher"]
