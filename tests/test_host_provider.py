from __future__ import annotations

from collections import namedtuple
from unittest.mock import patch

import psutil
import pytest

from hostmetrics.collectors.base import ProviderError
from hostmetrics.collectors.host_provider import HostMetricsProvider
from hostmetrics.models.snapshot import NetworkCounters

snetio = namedtuple(
    "snetio",
    ["bytes_sent", "bytes_recv", "packets_sent", "packets_recv", "errin", "errout", "dropin", "dropout"],
)
svmem = namedtuple("svmem", ["total", "available", "percent", "used", "free"])

_MODULE = "hostmetrics.collectors.host_provider.psutil"


@pytest.fixture
def provider() -> HostMetricsProvider:
    with patch(f"{_MODULE}.cpu_percent", return_value=0.0):
        return HostMetricsProvider()


def test_primes_cpu_baseline_on_construction():
    with patch(f"{_MODULE}.cpu_percent", return_value=0.0) as mock_cpu:
        HostMetricsProvider()
    mock_cpu.assert_called_once_with(interval=None)


def test_construction_survives_priming_failure():
    with patch(f"{_MODULE}.cpu_percent", side_effect=psutil.AccessDenied()):
        HostMetricsProvider()


# ── cpu ───────────────────────────────────────────────


def test_sample_cpu_is_instantaneous(provider: HostMetricsProvider):
    with patch(f"{_MODULE}.cpu_percent", return_value=12.5) as mock_cpu:
        assert provider.sample_cpu() == 12.5
    mock_cpu.assert_called_once_with(interval=0)


def test_sample_cpu_wraps_errors(provider: HostMetricsProvider):
    with patch(f"{_MODULE}.cpu_percent", side_effect=OSError("no /proc/stat")):
        with pytest.raises(ProviderError) as excinfo:
            provider.sample_cpu()
    assert excinfo.value.operation == "cpu"
    assert "no /proc/stat" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


# ── memory ────────────────────────────────────────────


def test_sample_memory(provider: HostMetricsProvider):
    mem = svmem(total=100, available=52, percent=48.2, used=48, free=52)
    with patch(f"{_MODULE}.virtual_memory", return_value=mem):
        assert provider.sample_memory() == 48.2


def test_sample_memory_wraps_psutil_error(provider: HostMetricsProvider):
    with patch(f"{_MODULE}.virtual_memory", side_effect=psutil.AccessDenied()):
        with pytest.raises(ProviderError) as excinfo:
            provider.sample_memory()
    assert excinfo.value.operation == "memory"


# ── network ───────────────────────────────────────────


def test_sample_network_aggregates(provider: HostMetricsProvider):
    counters = snetio(
        bytes_sent=52428800,
        bytes_recv=104857600,
        packets_sent=512,
        packets_recv=1024,
        errin=0, errout=0, dropin=0, dropout=0,
    )
    with patch(f"{_MODULE}.net_io_counters", return_value=counters) as mock_net:
        result = provider.sample_network()
    mock_net.assert_called_once_with(pernic=False)
    assert result == NetworkCounters(
        packets_recv=1024,
        packets_sent=512,
        bytes_recv=104857600,
        bytes_sent=52428800,
    )


def test_sample_network_without_interfaces(provider: HostMetricsProvider):
    with patch(f"{_MODULE}.net_io_counters", return_value=None):
        with pytest.raises(ProviderError) as excinfo:
            provider.sample_network()
    assert excinfo.value.operation == "network"


def test_sample_network_wraps_errors(provider: HostMetricsProvider):
    with patch(f"{_MODULE}.net_io_counters", side_effect=PermissionError("denied")):
        with pytest.raises(ProviderError):
            provider.sample_network()
