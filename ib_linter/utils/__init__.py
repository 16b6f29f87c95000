"""Utility helpers."""

from .strings import matches, snake_to_camel_case

__all__ = ["matches", "snake_to_camel_case"]
