"""Command-line client for the pinboard.in tag endpoints."""

__version__ = "0.1.0"
