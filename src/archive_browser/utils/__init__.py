"""Shared utilities: logging, settings and background threads."""
