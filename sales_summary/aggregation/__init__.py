"""Per-store and grand-total accumulation of extracted sales figures."""
