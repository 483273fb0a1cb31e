"""External integrations used by the buildplan service."""
