"""Background execution of blocking API calls for the Qt UI."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """Outcome of a background call, paired with the caller's context object."""

    succeeded = Signal(object, object)
    failed = Signal(object, object)


class ApiWorker(QRunnable):
    """Runs one callable on the global thread pool and reports its outcome."""

    def __init__(self, call: Callable[[], object], context: object = None) -> None:
        super().__init__()
        self._call = call
        self._context = context
        self.signals = WorkerSignals()

    def run(self) -> None:
        try:
            outcome = self._call()
        except Exception as exc:
            logger.debug("Background API call failed: %s", exc)
            self.signals.failed.emit(self._context, exc)
            return
        self.signals.succeeded.emit(self._context, outcome)


def run_in_background(
    call: Callable[[], object],
    on_success: Callable[[object, object], None],
    on_failure: Callable[[object, object], None],
    context: object = None,
) -> ApiWorker:
    """Start ``call`` on the pool.

    Both callbacks receive ``context`` first so the receiver can tell whether
    the outcome still concerns what is on screen. Connect them to methods of a
    widget so they run on the GUI thread.
    """
    worker = ApiWorker(call, context)
    worker.signals.succeeded.connect(on_success)
    worker.signals.failed.connect(on_failure)
    QThreadPool.globalInstance().start(worker)
    return worker
