"""Persist the SWOT snapshot under a single key of an opaque store."""

from __future__ import annotations

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor

from swot.config import settings
from swot.items.models import AnalysisSet
from swot.reporting.json_export import to_json
from swot.storage.redis_client import KeyValueStore
from swot.telemetry.metrics import store_errors

logger = logging.getLogger("swot.storage")


class Repository:
    """Best-effort load/save. Store failures are logged and never propagate.

    With an ``executor``, ``save_later`` hands the store write to it so a slow
    or unreachable store never holds up the caller. The executor must run one
    task at a time so snapshots land in the order they were taken.
    """

    def __init__(
        self,
        store: KeyValueStore | None,
        key: str | None = None,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self._store = store
        self._key = key or settings.store_key
        self._executor = executor

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> object | None:
        """Return the decoded snapshot, or None when absent or unreadable.

        The result is untrusted and must go through ``normalize``.
        """
        if self._store is None:
            return None
        try:
            raw = self._store.get(self._key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception:
            store_errors.labels(operation="load").inc()
            logger.exception("Failed to load SWOT snapshot from key=%s", self._key)
            return None

    def save(self, data: AnalysisSet) -> bool:
        if self._store is None:
            return False
        payload = self._snapshot(data)
        return payload is not None and self._write(payload)

    def save_later(self, data: AnalysisSet) -> Future:
        """Snapshot ``data`` now and write it on the executor.

        Without an executor the write happens inline and the returned future
        is already done.
        """
        if self._store is None or self._executor is None:
            return _completed(self.save(data))
        # Serialized on the caller's thread; the worker only sees an immutable string.
        payload = self._snapshot(data)
        if payload is None:
            return _completed(False)
        return self._executor.submit(self._write, payload)

    def flush(self) -> None:
        """Block until every pending background write has finished."""
        if self._executor is not None:
            self._executor.submit(lambda: None).result()

    def _snapshot(self, data: AnalysisSet) -> str | None:
        try:
            return to_json(data, indent=None)
        except Exception:
            store_errors.labels(operation="save").inc()
            logger.exception("Failed to serialize SWOT snapshot for key=%s", self._key)
            return None

    def _write(self, payload: str) -> bool:
        try:
            self._store.set(self._key, payload)
        except Exception:
            store_errors.labels(operation="save").inc()
            logger.exception("Failed to save SWOT snapshot to key=%s", self._key)
            return False
        return True


def _completed(result: bool) -> Future:
    future: Future = Future()
    future.set_result(result)
    return future
