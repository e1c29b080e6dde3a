"""
End-to-end decomposition driver.

  raw tokens -> Pass A (capitals) -> Pass B (doubled) -> peeling rounds
             -> sorted dictionary, candidates, residue
"""

from __future__ import annotations
from dataclasses import dataclass, field
from functools import partial
from typing import Iterable, List

from .passes import split_capitals, split_doubled
from .peeling import RoundStats, peel
from .progress import PROGRESS_INTERVAL, silent, status
from .runner import MAX_WORKERS, run_tasks
from .wordsets import CandidateLog, PendingQueue, WordSet


@dataclass
class DecompositionResult:
    dictionary: List[str]
    candidates: List[str]
    residue: List[str]
    loaded: int = 0
    capital_words: int = 0
    repeating_words: int = 0
    dropped: int = 0
    rounds: List[RoundStats] = field(default_factory=list)


def decompose(
    tokens: Iterable[str],
    *,
    max_workers: int = MAX_WORKERS,
    interval: float = PROGRESS_INTERVAL,
    verbose: bool = True,
) -> DecompositionResult:
    """Split a word list into root words, compound remainders and residue.

    Empty tokens carry nothing to decompose and are skipped. Odd-length
    tokens that reach the doubled-word pass are dropped there and counted in
    `dropped`; every other token ends up feeding the dictionary, the
    candidate log, or the residue.
    """
    emit = status if verbose else silent

    stage1 = PendingQueue(token for token in tokens if token)
    loaded = len(stage1)
    emit(f"Loaded {loaded:,} words")

    dictionary = WordSet()

    stage2 = PendingQueue()
    run_tasks(stage1, partial(split_capitals, dictionary=dictionary, forward=stage2),
              max_workers=max_workers)
    capital_words = len(dictionary)
    emit(f"Found {capital_words:,} words starting with capital")

    pass_b_input = stage2.drain()
    dropped = sum(1 for token in pass_b_input if len(token) % 2 != 0)
    stage2 = PendingQueue(pass_b_input)
    stage3 = PendingQueue()
    run_tasks(stage2, partial(split_doubled, dictionary=dictionary, forward=stage3),
              max_workers=max_workers)
    repeating_words = len(dictionary) - capital_words
    emit(f"Found {repeating_words:,} repeating words")

    candidate_log = CandidateLog()
    residue, rounds = peel(stage3, dictionary.snapshot(), dictionary, candidate_log,
                           max_workers=max_workers, interval=interval, emit=emit)

    result = DecompositionResult(
        dictionary=dictionary.sorted(),
        candidates=candidate_log.sorted(),
        residue=sorted(residue),
        loaded=loaded,
        capital_words=capital_words,
        repeating_words=repeating_words,
        dropped=dropped,
        rounds=rounds,
    )
    emit(f"Finished after {len(rounds)} round(s): {len(result.dictionary):,} dictionary words, "
         f"{len(result.candidates):,} candidates, {len(result.residue):,} residue words")
    return result
