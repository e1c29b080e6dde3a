"""
Bounded task runner.

A fixed pool of long-lived worker threads pulls tokens from a shared
PendingQueue until it is drained. At most `max_workers` actions are in
flight at once. A fault in any action stops the pool and is re-raised.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from threading import Event
from typing import Callable

from .wordsets import PendingQueue

MAX_WORKERS = 8  # concurrent actions per pass or round


def run_tasks(pending: PendingQueue, action: Callable[[str], None],
              max_workers: int = MAX_WORKERS) -> int:
    """Run `action` on every token taken from `pending`.

    Returns once the queue is empty and every worker has finished, with the
    number of tokens processed. Tokens queued while the pool is running are
    picked up too.
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    failed = Event()

    def worker() -> int:
        processed = 0
        while not failed.is_set():
            token = pending.take()
            if token is None:
                return processed
            try:
                action(token)
            except Exception:
                failed.set()
                raise
            processed += 1
        return processed

    total = 0
    while True:
        with ThreadPoolExecutor(max_workers=max_workers,
                                thread_name_prefix="wordsplit") as executor:
            futures = [executor.submit(worker) for _ in range(max_workers)]
        # result() re-raises the first worker fault
        total += sum(future.result() for future in futures)
        # a worker can exit on an empty queue just before another one refills it
        if pending.empty():
            return total
