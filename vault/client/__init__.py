"""Logical API clients."""

from .logical import Logical

__all__ = ["Logical"]
