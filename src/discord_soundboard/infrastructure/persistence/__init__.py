"""File-backed configuration sources."""
