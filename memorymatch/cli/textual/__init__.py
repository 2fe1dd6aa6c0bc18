"""Textual front-end for memory match."""

from .app import MemoryTextualApp, run_textual_app

__all__ = ["MemoryTextualApp", "run_textual_app"]
