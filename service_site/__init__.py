"""Content site service."""
