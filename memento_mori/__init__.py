"""Memento mori life grid: life-progress calculation and grid layout."""

from .version import __version__

__all__ = ["__version__"]
