"""Service layer: validation, layout inspection, and build initialization."""
