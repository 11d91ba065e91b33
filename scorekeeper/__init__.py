"""Scorekeeper: record store accessor over a managed key-value store."""

__version__ = "0.1.0"
