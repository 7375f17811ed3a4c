from __future__ import annotations

import logging

import psutil

from hostmetrics.collectors.base import MetricsProvider, ProviderError
from hostmetrics.models.snapshot import NetworkCounters

logger = logging.getLogger(__name__)


class HostMetricsProvider(MetricsProvider):
    """Reads CPU, memory and network counters of the local host via psutil."""

    name = "host"

    def __init__(self) -> None:
        # The first non-blocking reading has no baseline to compare against.
        try:
            psutil.cpu_percent(interval=None)
        except (psutil.Error, OSError) as exc:
            logger.debug("Could not prime CPU baseline: %s", exc)

    def sample_cpu(self) -> float:
        try:
            return float(psutil.cpu_percent(interval=0))
        except (psutil.Error, OSError) as exc:
            raise ProviderError("cpu", str(exc)) from exc

    def sample_memory(self) -> float:
        try:
            return float(psutil.virtual_memory().percent)
        except (psutil.Error, OSError) as exc:
            raise ProviderError("memory", str(exc)) from exc

    def sample_network(self) -> NetworkCounters:
        try:
            counters = psutil.net_io_counters(pernic=False)
        except (psutil.Error, OSError) as exc:
            raise ProviderError("network", str(exc)) from exc
        if counters is None:
            raise ProviderError("network", "no network interfaces reported")
        return NetworkCounters(
            packets_recv=counters.packets_recv,
            packets_sent=counters.packets_sent,
            bytes_recv=counters.bytes_recv,
            bytes_sent=counters.bytes_sent,
        )
