"""Shared constants for plugin manifest generation."""
