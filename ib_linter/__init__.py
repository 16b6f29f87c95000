"""Linter for Xcode interface builder documents (.xib and .storyboard)."""

__version__ = "0.1.0"
