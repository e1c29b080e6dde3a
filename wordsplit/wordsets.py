"""
Concurrent word containers shared between worker threads.

- PendingQueue: multi-producer bag of tokens with a destructive take.
- WordSet:      deduplicating set, insert-if-absent, no removal.
- CandidateLog: append-only log of remainders (duplicates allowed).

Each container carries its own synchronisation so callers never lock.
"""

from __future__ import annotations
from queue import Empty, SimpleQueue
from threading import Lock
from typing import FrozenSet, Iterable, Iterator, List, Optional


class PendingQueue:
    """Tokens waiting for the current pass or round. No ordering guarantee."""

    def __init__(self, tokens: Iterable[str] = ()):
        self._queue: SimpleQueue = SimpleQueue()
        for token in tokens:
            self._queue.put(token)

    def put(self, token: str):
        self._queue.put(token)

    def take(self) -> Optional[str]:
        """Remove and return one token, or None if the queue is empty."""
        try:
            return self._queue.get_nowait()
        except Empty:
            return None

    def drain(self) -> List[str]:
        items = []
        while True:
            token = self.take()
            if token is None:
                return items
            items.append(token)

    def empty(self) -> bool:
        return self._queue.empty()

    def __len__(self) -> int:
        return self._queue.qsize()


class WordSet:
    """Set of words where the first insertion wins and duplicates are ignored."""

    def __init__(self, words: Iterable[str] = ()):
        self._lock = Lock()
        self._words = set(words)

    def add(self, word: str) -> bool:
        """Insert word if absent. Returns True when the word was new."""
        with self._lock:
            if word in self._words:
                return False
            self._words.add(word)
            return True

    def update(self, words: Iterable[str]) -> int:
        return sum(1 for word in words if self.add(word))

    def snapshot(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._words)

    def sorted(self) -> List[str]:
        return sorted(self.snapshot())

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())


class CandidateLog:
    """Every remainder discovered across all peeling rounds."""

    def __init__(self):
        self._lock = Lock()
        self._entries: List[str] = []

    def extend(self, words: Iterable[str]):
        words = list(words)
        with self._lock:
            self._entries.extend(words)

    def sorted(self) -> List[str]:
        with self._lock:
            return sorted(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
