# chequetrack/services/outbox.py

import logging
import queue
import threading
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

Sender = Callable[[str, Dict[str, Any]], None]
FailureObserver = Callable[[str, Dict[str, Any], Exception], None]

_STOP = object()


class BestEffortOutbox:
    """
    Fire-and-forget delivery of remote pushes.

    `enqueue` never blocks and never raises; a single daemon worker drains the queue in
    order and hands each operation to `sender` once. A failed send is logged, reported
    to `on_failure` and dropped (no retry).
    """

    def __init__(self, sender: Sender, on_failure: Optional[FailureObserver] = None,
                 name: str = "chequetrack-outbox"):
        self.sender = sender
        self.on_failure = on_failure
        self._queue: "queue.Queue[Any]" = queue.Queue()
        self._lock = threading.Lock()
        self._worker: Optional[threading.Thread] = None
        self._name = name
        self._closed = False

    def enqueue(self, action: str, payload: Dict[str, Any]) -> None:
        if self._closed:
            logger.warning("Outbox closed, dropping %s.", action)
            return
        self._ensure_worker()
        self._queue.put((action, payload))
        logger.debug("Queued %s for remote push.", action)

    def _ensure_worker(self) -> None:
        with self._lock:
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(target=self._drain, name=self._name, daemon=True)
                self._worker.start()

    def _drain(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                self._deliver(item)
            finally:
                self._queue.task_done()

    def _deliver(self, item: Tuple[str, Dict[str, Any]]) -> None:
        action, payload = item
        try:
            self.sender(action, payload)
        except Exception as exc:
            logger.error("Sync push error (background) for %s: %s", action, exc)
            if self.on_failure is not None:
                try:
                    self.on_failure(action, payload, exc)
                except Exception:
                    logger.exception("Outbox failure observer raised.")

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Waits until every queued push has been attempted. Returns False on timeout."""
        if timeout is None:
            self._queue.join()
            return True
        done = threading.Event()

        def _join():
            self._queue.join()
            done.set()

        threading.Thread(target=_join, daemon=True).start()
        return done.wait(timeout)

    def close(self, timeout: Optional[float] = 5.0) -> None:
        self._closed = True
        worker = self._worker
        if worker is not None and worker.is_alive():
            self._queue.put(_STOP)
            worker.join(timeout)
