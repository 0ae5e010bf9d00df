"""HTTP API for quote verification and project persistence."""
