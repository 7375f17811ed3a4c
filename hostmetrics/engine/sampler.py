from __future__ import annotations

import asyncio
import logging

from hostmetrics.collectors.base import MetricsProvider, ProviderError
from hostmetrics.config import SAMPLE_INTERVAL_SECONDS
from hostmetrics.engine.snapshot_store import SnapshotStore
from hostmetrics.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


class Sampler:
    """Periodically captures a Snapshot from the provider and publishes it.

    The first sample is taken as soon as the loop starts, then one every
    ``interval`` seconds. A failed cycle is logged and skipped, leaving the
    previously published Snapshot current. There is no retry and no backoff.
    """

    name: str = "sampler"

    def __init__(
        self,
        store: SnapshotStore,
        provider: MetricsProvider,
        interval: float = SAMPLE_INTERVAL_SECONDS,
    ) -> None:
        self._store = store
        self._provider = provider
        self.interval = interval
        self._running = False
        self._stop_event: asyncio.Event | None = None
        self._task: asyncio.Task | None = None
        self.cycles = 0
        self.failures = 0

    # ── lifecycle ────────────────────────────────────────

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self.run(self._stop_event))
        logger.info(
            "Sampler started (provider=%s, interval=%.1fs)",
            self._provider.name,
            self.interval,
        )

    async def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._stop_event:
            self._stop_event.set()
        if self._task:
            await self._task
            self._task = None
        self._stop_event = None
        logger.info("Sampler stopped after %d cycles", self.cycles)

    # ── sampling ─────────────────────────────────────────

    async def run(self, stop_event: asyncio.Event) -> None:
        """Sample until ``stop_event`` is set."""
        while not stop_event.is_set():
            await self.sample_once()
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                continue

    async def sample_once(self) -> Snapshot | None:
        """Run one cycle. Returns the published Snapshot, or None if skipped."""
        self.cycles += 1
        try:
            snapshot = await asyncio.to_thread(self._capture)
        except ProviderError as exc:
            self.failures += 1
            logger.warning("Error getting metrics: %s", exc)
            return None
        except Exception:
            self.failures += 1
            logger.exception("Sampler [%s] failed to build snapshot", self._provider.name)
            return None
        self._store.publish(snapshot)
        return snapshot

    def _capture(self) -> Snapshot:
        # Any provider failure aborts the whole cycle.
        cpu_percent = self._provider.sample_cpu()
        memory_percent = self._provider.sample_memory()
        network = self._provider.sample_network()
        return Snapshot.capture(cpu_percent, memory_percent, network)

    @property
    def running(self) -> bool:
        return self._running
