"""Worker utilities for background processing."""

from .sweeper import Sweeper

__all__ = ["Sweeper"]
