"""Command-line interface for plugin-manifest."""
