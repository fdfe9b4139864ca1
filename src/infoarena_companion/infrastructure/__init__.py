"""Infrastructure layer for HTML page parsing."""
