"""Run blocking calls off the GUI thread."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from PySide6.QtCore import QObject, Signal

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Task:
    """
    A unit of work and the callbacks to run once it is done.
    """

    #: The blocking callable to run on the worker thread.
    func: Callable[[], Any]
    #: Called with the result of :attr:`func` if it returned.
    on_success: Callable[[Any], None] | None = None
    #: Called with the exception if :attr:`func` raised.
    on_error: Callable[[Exception], None] | None = None
    #: Called last, whatever the outcome.
    on_finished: Callable[[], None] | None = None
    #: Result of :attr:`func`.
    result: Any = field(default=None, init=False)
    #: Exception raised by :attr:`func`, if any.
    error: Exception | None = field(default=None, init=False)

    def run(self) -> None:
        """
        Run :attr:`func`, recording its result or exception.
        """
        try:
            self.result = self.func()
        except Exception as e:  # noqa: BLE001
            self.error = e

    def deliver(self) -> None:
        """
        Invoke the callbacks for the recorded outcome.
        """
        try:
            if self.error is not None:
                if self.on_error is not None:
                    self.on_error(self.error)
            elif self.on_success is not None:
                self.on_success(self.result)
        finally:
            if self.on_finished is not None:
                self.on_finished()


class TaskRunner(QObject):
    """
    Runs each task on its own daemon thread and delivers its callbacks on the
    thread this runner lives in (the GUI thread).

    Tasks are not queued, coordinated or cancellable: whichever finishes last
    delivers last.
    """

    #: Emitted from the worker thread; queued onto the runner's thread.
    _done = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        #: Worker threads that have not finished yet.
        self._threads: set[threading.Thread] = set()
        self._lock = threading.Lock()
        self._done.connect(self._deliver)

    def submit(
        self,
        func: Callable[[], Any],
        on_success: Callable[[Any], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
        on_finished: Callable[[], None] | None = None,
    ) -> Task:
        """
        Start running ``func`` on a worker thread.

        Args:
            func: Blocking callable to run

        Keyword Args:
            on_success: Called with the result of ``func``
            on_error: Called with the exception raised by ``func``
            on_finished: Called after either of the above

        Returns:
            The submitted :class:`Task`

        """
        task = Task(func, on_success, on_error, on_finished)
        thread = threading.Thread(target=self._work, args=(task,), daemon=True)
        with self._lock:
            self._threads.add(thread)
        thread.start()
        return task

    def _work(self, task: Task) -> None:
        task.run()
        with self._lock:
            self._threads.discard(threading.current_thread())
        self._done.emit(task)

    def _deliver(self, task: Task) -> None:
        task.deliver()

    @property
    def pending(self) -> int:
        """Number of tasks still running."""
        with self._lock:
            return len(self._threads)

    def wait(self, timeout: float | None = None) -> None:
        """
        Block until every running task's worker thread has finished.  Callbacks
        are still delivered through the event loop.

        Keyword Args:
            timeout: Seconds to wait for each thread (default: no limit)

        """
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)
