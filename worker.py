"""
Background worker for the UI.
Runs one blocking call (a move log request) at a time off the UI thread.
"""

import threading
from typing import Callable, Optional


class BackgroundWorker:
    """
    Runs a single blocking action in a daemon thread.

    While an action runs the worker is busy and refuses new ones. The
    finish step is handed to `schedule` so it runs on the UI thread
    (with Tkinter: lambda fn: root.after(0, fn)).
    """

    def __init__(self, schedule: Callable[[Callable[[], None]], None]):
        """
        Initialize the worker.

        Args:
            schedule: Queues a callback onto the UI thread.
        """
        self.schedule = schedule
        self.busy = False
        self.thread: Optional[threading.Thread] = None

    def submit(self, action: Callable[[], object], on_done: Optional[Callable[[], None]] = None) -> bool:
        """
        Start an action unless one is already running.

        Args:
            action: The blocking call.
            on_done: Called on the UI thread once the action has finished.

        Returns:
            True if the action was started.
        """
        if self.busy:
            return False

        self.busy = True
        self.thread = threading.Thread(target=self._run, args=(action, on_done), daemon=True)
        self.thread.start()
        return True

    def _run(self, action: Callable[[], object], on_done: Optional[Callable[[], None]]):
        try:
            action()
        except Exception as e:
            print(f"ERROR: background call failed: {e}")
        finally:
            self.schedule(lambda: self._finish(on_done))

    def _finish(self, on_done: Optional[Callable[[], None]]):
        self.busy = False
        if on_done is not None:
            on_done()
