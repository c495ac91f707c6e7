"""Runtime and persisted state models."""
