from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` in UTC as ``YYYY-MM-DD HH:MM:SS.mmmZ``.

    ``moment`` must be timezone-aware; naive values are rejected rather than
    assumed to be UTC.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError("format_timestamp requires a timezone-aware datetime")
    moment = moment.astimezone(timezone.utc)
    return f"{moment.strftime(TIMESTAMP_FORMAT)}.{moment.microsecond // 1000:03d}Z"


class NetworkCounters(BaseModel):
    """Cumulative counters summed over every network interface."""

    model_config = ConfigDict(frozen=True)

    packets_recv: NonNegativeInt = 0
    packets_sent: NonNegativeInt = 0
    bytes_recv: NonNegativeInt = 0
    bytes_sent: NonNegativeInt = 0


class Snapshot(BaseModel):
    """Host metrics captured by one sampling cycle.

    ``rx_rate`` and ``tx_rate`` hold the cumulative packet counters reported
    at capture time, not per-interval deltas.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: str = Field(default="", alias="time")
    cpu_percent: float = Field(default=0.0, ge=0.0, le=100.0, alias="cpu_perc")
    memory_percent: float = Field(default=0.0, ge=0.0, le=100.0, alias="memory_perc")
    rx_rate: NonNegativeInt = 0
    tx_rate: NonNegativeInt = 0
    rx_bytes: NonNegativeInt = 0
    tx_bytes: NonNegativeInt = 0

    @classmethod
    def capture(
        cls,
        cpu_percent: float,
        memory_percent: float,
        network: NetworkCounters,
        captured_at: datetime | None = None,
    ) -> Snapshot:
        captured_at = captured_at or datetime.now(timezone.utc)
        return cls(
            timestamp=format_timestamp(captured_at),
            cpu_percent=cpu_percent,
            memory_percent=memory_percent,
            rx_rate=network.packets_recv,
            tx_rate=network.packets_sent,
            rx_bytes=network.bytes_recv,
            tx_bytes=network.bytes_sent,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
