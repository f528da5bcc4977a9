# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Launcher preparing and running a chain of GROMACS simulations
(equilibration phases followed by production) for one or more replicas.
"""

from .launcher import ReplicateLauncher

__all__ = ["ReplicateLauncher"]
