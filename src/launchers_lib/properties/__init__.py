# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Properties and structured metadata of launched jobs.

This module provides the data representations underlying the launchers:
the resources a job requests, the defaults those resources fall back to,
and the job request constructed for every processed input.
"""
