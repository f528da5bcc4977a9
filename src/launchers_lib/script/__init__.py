# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Launcher of arbitrary bash scripts.
"""

from .launcher import ScriptLauncher

__all__ = ["ScriptLauncher"]
