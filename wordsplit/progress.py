"""
Console progress for long passes.

ProgressReporter runs beside a peeling round in its own thread and prints a
throughput/ETA line once per interval until the round signals it is done.
"""

from __future__ import annotations
import time
from datetime import timedelta
from threading import Event, Thread
from typing import Callable, Optional, Sized

from tqdm import tqdm

PROGRESS_INTERVAL = 1.0  # seconds between round status lines


def progress(iterable, desc="", total=None):
    return tqdm(iterable, desc=desc, total=total, ascii=" ▖▘▝▗▚▞█",
                bar_format='{desc}: |{bar:20}| {n_fmt}', leave=False)


def status(message: str):
    """Print a status line without tearing an active progress bar."""
    tqdm.write(message)


def silent(message: str):
    pass


class ProgressReporter:
    """Periodic status lines for one peeling round.

    Used as a context manager around the round's task runner: entering starts
    the reporter thread, leaving signals `done` and joins it, so no status
    thread outlives its round. When `done` is set during a wait the reporter
    stops without emitting a last line.
    """

    def __init__(
        self,
        pending: Sized,
        candidates: Sized,
        interval: float = PROGRESS_INTERVAL,
        emit: Callable[[str], None] = status,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.pending = pending
        self.candidates = candidates
        self.interval = interval
        self.emit = emit
        self.clock = clock
        self.starting_count = len(pending)
        self.started = clock()
        self.done = Event()
        self._thread: Optional[Thread] = None

    def report(self) -> Optional[str]:
        elapsed = self.clock() - self.started
        left = len(self.pending)
        completed = self.starting_count - left
        throughput = completed / elapsed if elapsed > 0 else 0.0
        if throughput <= 0:
            return None

        eta = timedelta(seconds=int(left / throughput))
        line = (f"{time.strftime('%Y-%m-%d %H:%M:%S')}: {left:,} input words left. "
                f"{len(self.candidates):,} new candidates discovered. ETA {eta}")
        self.emit(line)
        return line

    def run(self):
        while not self.done.wait(self.interval):
            self.report()

    def start(self):
        self.started = self.clock()
        self._thread = Thread(target=self.run, name="wordsplit-progress", daemon=True)
        self._thread.start()

    def stop(self):
        self.done.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> ProgressReporter:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
