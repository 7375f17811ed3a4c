from .base import MetricsProvider, ProviderError
from .host_provider import HostMetricsProvider

__all__ = [
    "HostMetricsProvider",
    "MetricsProvider",
    "ProviderError",
]
