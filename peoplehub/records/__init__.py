"""Records module — per-employee sub-resource collections (bonuses, notes, ...)."""
