"""recourse CLI package."""
