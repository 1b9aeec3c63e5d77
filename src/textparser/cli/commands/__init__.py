"""Top-level textparser commands."""
