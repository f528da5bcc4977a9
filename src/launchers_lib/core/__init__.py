# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for the launchers.

This module collects the foundational helpers used across the codebase:
configuration, error types and handlers, per-file repetition with error
tracking, help formatting, and structured logging.
"""
