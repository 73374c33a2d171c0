"""Data models for Status Service."""

from .status import ServiceStatus

__all__ = [
    "ServiceStatus",
]
