# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Legacy Sun Grid Engine backend: translation of job resources into `#$`
directives and submission of job files using `qsub`.
"""

from .sge import SGE

__all__ = ["SGE"]
