"""HTTP API for archive person lookup."""
