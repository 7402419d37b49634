"""Unit tests for Task and TaskRunner."""

import threading
import time
from unittest.mock import Mock

from saasapp.services.tasks import Task, TaskRunner


def process_until(app, condition, timeout=2.0):
    """Process Qt events until ``condition()`` is true or ``timeout`` passes."""
    start_time = time.time()
    while time.time() - start_time < timeout:
        app.processEvents()
        if condition():
            return True
        time.sleep(0.01)
    return False


class TestTask:
    """Test cases for Task."""

    def test_success_callbacks(self):
        """Test on_success then on_finished run after a successful call."""
        calls = []
        task = Task(
            lambda: 42,
            on_success=lambda result: calls.append(("success", result)),
            on_error=lambda error: calls.append(("error", error)),
            on_finished=lambda: calls.append(("finished", None)),
        )

        task.run()
        task.deliver()

        assert task.result == 42
        assert task.error is None
        assert calls == [("success", 42), ("finished", None)]

    def test_error_callbacks(self):
        """Test on_error then on_finished run after a failing call."""
        error = RuntimeError("boom")
        on_success = Mock()
        on_error = Mock()
        on_finished = Mock()

        def fail():
            raise error

        task = Task(fail, on_success, on_error, on_finished)
        task.run()
        task.deliver()

        assert task.error is error
        on_success.assert_not_called()
        on_error.assert_called_once_with(error)
        on_finished.assert_called_once_with()

    def test_finished_runs_even_if_callback_raises(self):
        """Test on_finished still runs when on_success raises."""
        on_finished = Mock()
        task = Task(lambda: 1, on_success=Mock(side_effect=ValueError), on_finished=on_finished)
        task.run()

        try:
            task.deliver()
        except ValueError:
            pass

        on_finished.assert_called_once_with()

    def test_callbacks_are_optional(self):
        """Test a task without callbacks can be delivered."""
        task = Task(lambda: None)
        task.run()
        task.deliver()


class TestTaskRunner:
    """Test cases for TaskRunner."""

    def test_runs_on_worker_thread_and_delivers_on_gui_thread(self, qapp):
        """Test func runs off the GUI thread and callbacks run on it."""
        gui_thread = threading.current_thread()
        seen = {}

        def work():
            seen["work"] = threading.current_thread()
            return "done"

        def on_success(result):
            seen["result"] = result
            seen["callback"] = threading.current_thread()

        runner = TaskRunner()
        runner.submit(work, on_success=on_success)

        assert process_until(qapp, lambda: "callback" in seen)
        assert seen["work"] is not gui_thread
        assert seen["callback"] is gui_thread
        assert seen["result"] == "done"

    def test_delivers_errors(self, qapp):
        """Test exceptions are delivered to on_error."""
        errors = []
        finished = []

        def work():
            raise ConnectionError("refused")

        runner = TaskRunner()
        runner.submit(work, on_error=errors.append, on_finished=lambda: finished.append(True))

        assert process_until(qapp, lambda: bool(finished))
        assert len(errors) == 1
        assert isinstance(errors[0], ConnectionError)

    def test_wait_and_pending(self, qapp):
        """Test wait() blocks until worker threads are done."""
        release = threading.Event()
        runner = TaskRunner()
        runner.submit(release.wait)

        assert runner.pending == 1
        release.set()
        runner.wait(timeout=2.0)
        assert runner.pending == 0
        # Deliver the queued callbacks
        qapp.processEvents()
