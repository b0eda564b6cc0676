"""
Tests for the candidate pool.
"""

import unittest

from wordle_race.feedback import evaluate, feedback_from_str
from wordle_race.pool import CandidatePool
from wordle_race.words import WordBank


class TestPool(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.pool = CandidatePool(WordBank.load().solver_words)

    def test_normalizes(self) -> None:
        pool = CandidatePool(["slate", "CRANE", "crane"])
        self.assertEqual(pool.words, ("CRANE", "SLATE"))
        self.assertEqual(len(pool), 2)
        assert "CRANE" in pool
        assert "crane" not in pool
        self.assertEqual(pool.first, "CRANE")
        self.assertEqual(list(pool), ["CRANE", "SLATE"])

    def test_empty(self) -> None:
        pool = CandidatePool([])
        assert pool.is_empty
        assert pool.first is None

    def test_possible(self) -> None:
        pool = CandidatePool(["COINS", "SCION", "PAPER"])
        filtered = pool.filter("COINS", feedback_from_str("--=--"))
        self.assertEqual(filtered.words, ("SCION", ))

    def test_specific(self) -> None:
        pool = CandidatePool(["TACIT", "TAROT", "TRAIT"])
        pool = pool.filter("RATES", feedback_from_str("_=-__"))
        pool = pool.filter("TYING", feedback_from_str("=_-__"))
        assert "TACIT" in pool

    def test_shrinks_to_subset(self) -> None:
        for guess in ("SALET", "CRANE", "LLAMA", "FJORD"):
            for secret in ("CRANE", "ALLOW", "HUMOR", "QUEEN"):
                feedback = evaluate(guess, secret)
                filtered = self.pool.filter(guess, feedback)
                assert len(filtered) <= len(self.pool)
                assert set(filtered).issubset(set(self.pool))
                assert secret in filtered, (
                    f"{secret} eliminated by its own clue for {guess}"
                )
                if guess != secret:
                    assert guess not in filtered

    def test_refilter_is_idempotent(self) -> None:
        feedback = evaluate("SALET", "CRANE")
        once = self.pool.filter("SALET", feedback)
        twice = once.filter("SALET", feedback)
        self.assertEqual(once, twice)

    def test_filter_leaves_original(self) -> None:
        n = len(self.pool)
        self.pool.filter("SALET", evaluate("SALET", "CRANE"))
        self.assertEqual(len(self.pool), n)

    def test_prune(self) -> None:
        pool = CandidatePool(["COINS", "SCION", "PAPER"])
        n_eliminated = pool.prune("COINS", feedback_from_str("--=--"))
        self.assertEqual(n_eliminated, 2)
        self.assertEqual(pool.words, ("SCION", ))
        assert "PAPER" not in pool
