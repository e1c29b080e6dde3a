"""wordsplit: decompose a word list into root words, compound candidates and residue."""

from .passes import split_capitals, split_doubled
from .peeling import RoundStats, peel, peel_token, run_round
from .pipeline import DecompositionResult, decompose
from .runner import run_tasks
from .wordsets import CandidateLog, PendingQueue, WordSet

__version__ = "0.1.0"
