"""Application use cases (orchestrate repositories and domain rules)."""
