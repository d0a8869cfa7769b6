"""Small shared helpers (logging configuration)."""
