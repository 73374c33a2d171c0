"""HTTP API for Status Service."""
