"""Pydantic models: per-file sales records and pipeline run metadata."""
