"""Tests for the iterative peeling engine."""

import pytest

from wordsplit import peeling
from wordsplit.peeling import peel, peel_token, run_round
from wordsplit.progress import silent
from wordsplit.wordsets import CandidateLog, PendingQueue, WordSet

# long enough that no progress line fires during a test round
QUIET_INTERVAL = 60.0


def _round(tokens, frontier):
    return run_round(PendingQueue(tokens), frontier, interval=QUIET_INTERVAL, emit=silent)


def _peel(tokens, frontier, dictionary=None):
    dictionary = dictionary if dictionary is not None else WordSet(frontier)
    log = CandidateLog()
    residue, rounds = peel(PendingQueue(tokens), frontier, dictionary, log,
                           interval=QUIET_INTERVAL, emit=silent)
    return residue, rounds, dictionary, log


class TestPeelToken:
    def test_strips_matching_prefix(self):
        assert peel_token("catfish", ("cat", "dog")) == "fish"

    def test_full_match_leaves_empty_remainder(self):
        assert peel_token("cat", ("cat",)) == ""

    def test_no_match(self):
        assert peel_token("xyz", ("cat", "dog")) is None

    def test_first_listed_word_wins(self):
        assert peel_token("catfish", ("ca", "cat")) == "tfish"
        assert peel_token("catfish", ("cat", "ca")) == "fish"


class TestRunRound:
    def test_splits_into_candidates_and_forwarded(self):
        candidates, next_pending = _round(["catdog", "catfish", "xyz"], {"cat", "dog"})
        assert candidates.sorted() == ["dog", "fish"]
        assert next_pending.drain() == ["xyz"]

    def test_known_remainder_is_still_a_round_candidate(self):
        # "dog" is already a frontier word but is found again as a remainder
        candidates, _ = _round(["catdog"], {"cat", "dog"})
        assert candidates.sorted() == ["dog"]

    def test_remainder_found_twice_is_deduplicated(self):
        candidates, _ = _round(["catdog", "dogdog", "catdog"], {"cat", "dog"})
        assert candidates.sorted() == ["dog"]

    def test_fully_decomposed_token_is_dropped(self):
        candidates, next_pending = _round(["cat", "dog"], {"cat", "dog"})
        assert len(candidates) == 0
        assert next_pending.empty()

    def test_pending_is_drained(self):
        pending = PendingQueue(["catfish", "xyz"])
        run_round(pending, {"cat"}, interval=QUIET_INTERVAL, emit=silent)
        assert pending.empty()


class TestPeel:
    def test_runs_until_a_round_finds_nothing(self):
        residue, rounds, dictionary, log = _peel(["catdog", "catfish", "xyz"], {"cat", "dog"})

        assert residue == ["xyz"]
        assert [r.candidates for r in rounds] == [2, 0]
        assert [r.frontier_words for r in rounds] == [2, 2]
        assert [r.input_words for r in rounds] == [3, 1]
        assert log.sorted() == ["dog", "fish"]
        assert dictionary.sorted() == ["cat", "dog", "fish"]

    def test_single_round_without_match_terminates(self):
        residue, rounds, _, log = _peel(["xyz"], {"fish"})
        assert residue == ["xyz"]
        assert len(rounds) == 1
        assert rounds[0].forwarded == 1
        assert len(log) == 0

    def test_empty_frontier_runs_no_round(self):
        residue, rounds, _, _ = _peel(["abcd", "efgh"], set())
        assert sorted(residue) == ["abcd", "efgh"]
        assert rounds == []

    def test_candidates_chain_across_generations(self):
        # round 1 peels "sea", round 2 peels "horse"
        residue, rounds, dictionary, log = _peel(["seahorse", "horsefly"], {"sea"})
        assert residue == []
        assert [r.candidates for r in rounds] == [1, 1, 0]
        assert log.sorted() == ["fly", "horse"]
        assert "fly" in dictionary

    def test_candidate_log_keeps_repeats_across_rounds(self):
        # "dog" is found in round 1 and again in round 2
        residue, rounds, _, log = _peel(["catdog", "dogdog"], {"cat"})
        assert log.sorted() == ["dog", "dog"]
        assert [r.candidates for r in rounds] == [1, 1, 0]
        assert residue == []

    def test_dictionary_and_residue_are_disjoint(self):
        residue, _, dictionary, _ = _peel(["catdog", "catfish", "xyz", "fishfish"], {"cat", "dog"})
        assert not set(residue) & set(dictionary.sorted())


def test_round_fault_propagates_and_stops_reporter(monkeypatch):
    reporters = []
    real_init = peeling.ProgressReporter.__init__

    def track(self, *args, **kwargs):
        real_init(self, *args, **kwargs)
        reporters.append(self)

    def explode(token, frontier):
        raise ValueError(f"cannot peel {token}")

    monkeypatch.setattr(peeling.ProgressReporter, "__init__", track)
    monkeypatch.setattr(peeling, "peel_token", explode)

    with pytest.raises(ValueError, match="cannot peel"):
        _round(["catdog", "xyz"], {"cat"})

    assert len(reporters) == 1
    assert reporters[0].done.is_set()
    assert reporters[0]._thread is None
