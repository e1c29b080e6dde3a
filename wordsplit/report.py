"""Run summary: stage counts, per-round table and the most common roots found."""

from __future__ import annotations
from functools import lru_cache
from typing import Iterable, List, Tuple

from wordfreq import zipf_frequency

from .pipeline import DecompositionResult
from .progress import progress

TOP_WORDS = 20  # dictionary words ranked in the run summary


@lru_cache(maxsize=None)
def get_zipf(word: str) -> float:
    return zipf_frequency(word, 'en')


def rank_words(words: Iterable[str], top_n: int = TOP_WORDS) -> Tuple[List[Tuple[str, float]], int]:
    """Rank words by English frequency, most common first.

    Returns the top `top_n` (word, zipf) pairs and the number of words
    wordfreq does not know at all (zipf 0).
    """
    scored = [(word, get_zipf(word)) for word in progress(words, "Ranking dictionary words")]
    unknown = sum(1 for _, freq in scored if freq == 0)
    scored.sort(key=lambda x: (-x[1], x[0]))
    return scored[:top_n], unknown


def display_results(result: DecompositionResult, top_n: int = TOP_WORDS):
    print(f"\n{'='*70}")
    print(f"DECOMPOSITION RESULTS")
    print(f"{'='*70}")
    print(f"Loaded words: {result.loaded:,}")
    print(f"  Roots from capitalized words: {result.capital_words:,}")
    print(f"  Roots from repeating words: {result.repeating_words:,}")
    print(f"  Dropped (odd length, not capitalized): {result.dropped:,}")
    print(f"Dictionary words: {len(result.dictionary):,}")
    print(f"Candidates: {len(result.candidates):,}")
    print(f"Residue words: {len(result.residue):,}")

    if result.rounds:
        print(f"\n--- Rounds ---")
        print(f"  {'gen':>3}  {'input':>10}  {'frontier':>10}  {'found':>10}  {'left':>10}  {'secs':>7}")
        for r in result.rounds:
            print(f"  {r.generation:3d}  {r.input_words:10,}  {r.frontier_words:10,}  "
                  f"{r.candidates:10,}  {r.forwarded:10,}  {r.seconds:7.2f}")

    if top_n <= 0 or not result.dictionary:
        return

    top, unknown = rank_words(result.dictionary, top_n)
    print(f"\n--- Top {top_n} dictionary words by frequency ---")
    for i, (word, freq) in enumerate(top):
        print(f"  {i+1:3d}. {word:<20} zipf={freq:.2f}")
    print(f"\n  Not recognised by wordfreq: {unknown:,} of {len(result.dictionary):,}")
