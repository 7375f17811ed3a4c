from __future__ import annotations

import threading

from hostmetrics.models.snapshot import Snapshot


class SnapshotStore:
    """Holds the single current Snapshot shared by the sampler and the API.

    Snapshots are immutable, so a read hands out the stored reference; the
    lock only guards swapping that reference. A plain ``threading.Lock`` is
    used so the store can be touched from the event loop and from worker
    threads alike.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current = Snapshot()
        self._publish_count = 0

    def publish(self, snapshot: Snapshot) -> None:
        if not isinstance(snapshot, Snapshot):
            raise TypeError(f"expected Snapshot, got {type(snapshot).__name__}")
        with self._lock:
            self._current = snapshot
            self._publish_count += 1

    def read(self) -> Snapshot:
        with self._lock:
            return self._current

    @property
    def publish_count(self) -> int:
        with self._lock:
            return self._publish_count
