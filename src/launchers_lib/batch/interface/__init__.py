# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Abstractions for integrating the launchers with HPC batch scheduling systems.

- `BatchInterface`: the interface every batch-system backend implements. It
  translates job resources into scheduler directives and submits job files.

- `BatchMeta`: a metaclass that registers available batch-system backends
  and provides mechanisms for selecting one by name, from the environment,
  from the configuration, or by probing system availability. The
  `@batch_system` decorator registers implementations automatically.
"""

from .interface import BatchInterface
from .meta import BatchMeta, batch_system

__all__ = [
    "BatchInterface",
    "BatchMeta",
    "batch_system",
]
