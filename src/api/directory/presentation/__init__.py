"""Presentation helpers for the directory bounded context."""
