"""Competitive Companion style task extraction for InfoArena problem pages."""

__version__ = "0.1.0"
