from .snapshot import NetworkCounters, Snapshot, format_timestamp

__all__ = [
    "NetworkCounters",
    "Snapshot",
    "format_timestamp",
]
