"""Console reporting helpers."""

from .stdout import render_summary

__all__ = ["render_summary"]
