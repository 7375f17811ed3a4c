from __future__ import annotations

from abc import ABC, abstractmethod

from hostmetrics.models.snapshot import NetworkCounters


class ProviderError(Exception):
    """Raised when the host refuses or fails to report a measurement."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class MetricsProvider(ABC):
    """Source of raw host measurements.

    Each operation is independently fallible and signals failure by raising
    ``ProviderError``.
    """

    name: str = "base"

    @abstractmethod
    def sample_cpu(self) -> float:
        """Aggregate CPU utilisation percentage across all cores."""
        ...

    @abstractmethod
    def sample_memory(self) -> float:
        """Percentage of physical memory in use."""
        ...

    @abstractmethod
    def sample_network(self) -> NetworkCounters:
        """Cumulative packet and byte counters over all interfaces."""
        ...
