"""ABOUTME: Soul-link run tools for Pokemon team building and type matchups.
ABOUTME: Exposes the package version."""

__version__ = "0.1.0"
