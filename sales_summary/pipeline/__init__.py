"""Pipeline stages: run bookkeeping and the sales summary orchestration."""
