from .sampler import Sampler
from .snapshot_store import SnapshotStore

__all__ = [
    "Sampler",
    "SnapshotStore",
]
