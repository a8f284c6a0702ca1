"""Breakaway Blueprint readiness assessment."""

__version__ = "1.0.0"
