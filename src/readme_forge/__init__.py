"""Combine the package READMEs into the root README and share the changelog."""

__version__ = "0.1.0"
