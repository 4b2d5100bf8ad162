"""HTTP API for the user registry."""
