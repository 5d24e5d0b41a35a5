"""HTTP API for salary records."""
