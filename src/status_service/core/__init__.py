"""Core services for Status Service."""
