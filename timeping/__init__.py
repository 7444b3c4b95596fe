"""Hashed time-wheel task scheduler with a pooled, intrusive task list."""

__version__ = "0.1.0"
__all__ = ["__version__"]