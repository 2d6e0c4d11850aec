"""Infrastructure layer - storage implementations and dependency wiring."""
