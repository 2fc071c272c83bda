"""Core import building blocks: paths, settings, parsing, resolution and storage."""
