# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Management of the default resources requested by all launchers.
"""

from .presenter import DefaultsPresenter

__all__ = ["DefaultsPresenter"]
