"""textparser config commands."""
