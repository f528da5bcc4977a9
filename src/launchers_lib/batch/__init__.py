# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Batch-system backends of the launchers.

Importing this package registers all supported backends (Slurm and the legacy
SGE) with `BatchMeta`, so that they can be selected by name or auto-detected.
"""

from .interface import BatchInterface, BatchMeta, batch_system
from .sge import SGE
from .slurm import Slurm

__all__ = ["BatchInterface", "BatchMeta", "batch_system", "SGE", "Slurm"]
