"""Process-wide setup shared by the CLI and the HTTP service."""
