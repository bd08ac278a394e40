"""Shared helpers: logging setup and clock access."""
