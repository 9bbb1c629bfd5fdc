"""
Test script for the UI background worker.
No Tk needed: the UI thread is stood in for by a list of queued callbacks.

Usage:
    python test_worker.py      # or: pytest test_worker.py
"""

import sys
import threading
from unittest.mock import MagicMock, patch

from logic.game_state import Player
from move_log.client import MoveLogClient
from game_session import GameSession
from worker import BackgroundWorker


def make_worker():
    """A worker whose finish callbacks wait in a list until run_pending()."""
    pending = []
    return BackgroundWorker(pending.append), pending


def run_pending(pending):
    while pending:
        pending.pop(0)()


def test_one_call_at_a_time():
    worker, pending = make_worker()
    release = threading.Event()
    started = threading.Event()

    def slow_call():
        started.set()
        release.wait(5)

    second = MagicMock()

    assert worker.submit(slow_call)
    assert started.wait(5)
    assert worker.busy

    # A second click while the first call is out is ignored
    assert not worker.submit(second)

    release.set()
    worker.thread.join(5)
    second.assert_not_called()


def test_busy_until_result_reaches_ui_thread():
    worker, pending = make_worker()
    on_done = MagicMock()

    assert worker.submit(lambda: None, on_done=on_done)
    worker.thread.join(5)

    # The call is over but its result has not been shown yet
    assert worker.busy
    on_done.assert_not_called()

    run_pending(pending)
    assert not worker.busy
    on_done.assert_called_once_with()

    assert worker.submit(lambda: None)


def test_call_runs_off_the_calling_thread():
    worker, pending = make_worker()
    seen = []

    worker.submit(lambda: seen.append(threading.current_thread()))
    worker.thread.join(5)

    assert seen and seen[0] is not threading.current_thread()
    assert seen[0].daemon


def test_failing_call_still_frees_the_worker():
    worker, pending = make_worker()

    def broken():
        raise RuntimeError("boom")

    on_done = MagicMock()
    with patch("builtins.print") as mock_print:
        worker.submit(broken, on_done=on_done)
        worker.thread.join(5)
    run_pending(pending)

    assert not worker.busy
    on_done.assert_called_once_with()
    assert "boom" in mock_print.call_args.args[0]


def test_session_move_in_background():
    session = GameSession(MoveLogClient(simulate=True), "test-game")
    worker, pending = make_worker()
    shown = []

    assert worker.submit(lambda: session.make_move(4), on_done=lambda: shown.append(session.state))
    assert not worker.submit(lambda: session.make_move(0))

    worker.thread.join(5)
    run_pending(pending)

    assert shown[0].board[4] == Player.X
    assert shown[0].board[0] is None
    assert session.status_text == "Player O's turn"


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Background Worker Tests")
    print("="*60)

    tests = {name: fn for name, fn in globals().items() if name.startswith("test_") and callable(fn)}

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except AssertionError as e:
            print(f"  ✗ {name} FAILED: {e}")
            results[name] = False

    print("\n" + "="*60)
    for name, passed in results.items():
        print(f"  {name}: {'✓ PASS' if passed else '✗ FAIL'}")
    print("="*60)

    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
