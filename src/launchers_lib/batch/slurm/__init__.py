# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Slurm backend: translation of job resources into `#SBATCH` directives and
submission of job files using `sbatch`.
"""

from .slurm import Slurm

__all__ = ["Slurm"]
