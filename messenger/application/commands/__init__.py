"""Commands - write operations."""
