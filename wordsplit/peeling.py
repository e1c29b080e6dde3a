"""
Iterative peeling engine.

Each round matches the pending tokens against the frontier, the words found
by the previous round only, and strips the matched prefix:

  frontier {cat, dog}:  catfish -> fish (candidate)
                        catdog  -> dog  (candidate)
                        xyz     -> forwarded to the next round

The remainders of a round become the next frontier. The loop stops once a
round finds nothing new, and whatever is still pending is the residue.
"""

from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .progress import PROGRESS_INTERVAL, ProgressReporter, status
from .runner import MAX_WORKERS, run_tasks
from .wordsets import CandidateLog, PendingQueue, WordSet


@dataclass
class RoundStats:
    generation: int
    input_words: int
    frontier_words: int
    candidates: int
    forwarded: int
    seconds: float


def peel_token(token: str, frontier: Iterable[str]) -> Optional[str]:
    """Strip the first frontier word that prefixes `token`.

    Returns the remainder ("" when the token is fully consumed), or None if
    no frontier word matches. Which word wins among several matching
    prefixes depends on frontier iteration order.
    """
    for word in frontier:
        if token.startswith(word):
            return token[len(word):]
    return None


def run_round(
    pending: PendingQueue,
    frontier: Iterable[str],
    max_workers: int = MAX_WORKERS,
    interval: float = PROGRESS_INTERVAL,
    emit: Callable[[str], None] = status,
) -> Tuple[WordSet, PendingQueue]:
    """Peel every pending token once against a fixed frontier.

    Returns the round's deduplicated candidates and the tokens left for the
    next round. `pending` is drained.
    """
    frontier = tuple(frontier)
    candidates = WordSet()
    next_pending = PendingQueue()

    def peel_one(token: str):
        remainder = peel_token(token, frontier)
        if remainder is None:
            next_pending.put(token)
        elif remainder:
            candidates.add(remainder)

    with ProgressReporter(pending, candidates, interval=interval, emit=emit):
        run_tasks(pending, peel_one, max_workers=max_workers)

    return candidates, next_pending


def peel(
    pending: PendingQueue,
    frontier: Iterable[str],
    dictionary: WordSet,
    candidate_log: CandidateLog,
    max_workers: int = MAX_WORKERS,
    interval: float = PROGRESS_INTERVAL,
    emit: Callable[[str], None] = status,
) -> Tuple[List[str], List[RoundStats]]:
    """Run peeling rounds until a round's frontier is empty.

    Every candidate is appended to `candidate_log` and added to `dictionary`.
    Returns the residue and per-round statistics.
    """
    frontier = frozenset(frontier)
    rounds: List[RoundStats] = []

    while frontier:
        input_words = len(pending)
        frontier_words = len(frontier)
        emit(f"Starting searching by dictionary. {input_words:,} input words. "
             f"{frontier_words:,} dictionary words to check.")
        started = time.monotonic()

        candidates, pending = run_round(pending, frontier, max_workers=max_workers,
                                        interval=interval, emit=emit)

        frontier = candidates.snapshot()
        candidate_log.extend(frontier)
        dictionary.update(frontier)

        rounds.append(RoundStats(
            generation=len(rounds) + 1,
            input_words=input_words,
            frontier_words=frontier_words,
            candidates=len(frontier),
            forwarded=len(pending),
            seconds=time.monotonic() - started,
        ))

    return pending.drain(), rounds
