"""Seedable pseudo-random generator with common distributions, diagnostics and a command line tool."""

__version__ = "0.1.0"
__all__ = ["cli", "diagnostics", "generator", "tables"]