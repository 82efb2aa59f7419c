"""HTTP API for the mock exam player."""
