"""Status response model."""

from enum import Enum


class ServiceStatus(str, Enum):
    """Values reported by the status endpoint."""
    UP = "UP"
