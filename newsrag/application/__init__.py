"""Application layer: use-case orchestration over boundary adapters."""
