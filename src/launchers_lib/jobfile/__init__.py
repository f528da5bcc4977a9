# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Generation of submission scripts.

`SubmissionScript` holds the three ordered sections of a job file (scheduler
directives, environment setup, and the commands of the computation) and
renders them deterministically. `ScriptGenerator` assembles such a script from
a `JobRequest` using the selected batch system.
"""

from .generator import ScriptGenerator
from .script import SubmissionScript

__all__ = ["ScriptGenerator", "SubmissionScript"]
