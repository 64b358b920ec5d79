"""DTOs for API responses."""
