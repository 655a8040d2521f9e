"""Helpers for the termshapes CLI."""

from .messages import warn

__all__ = ["warn"]
