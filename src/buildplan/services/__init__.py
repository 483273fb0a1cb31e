"""Registry, resolution and summary services."""
