"""Settings and dependency injection."""
