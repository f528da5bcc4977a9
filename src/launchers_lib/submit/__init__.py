# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Submission of generated job files.

`Submitter` either leaves a job file in place (dry run) or hands it to the
batch system's submission command and archives it into the per-user jobs
directory.
"""

from .submitter import Submitter

__all__ = ["Submitter"]
