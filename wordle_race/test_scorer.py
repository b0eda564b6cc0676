"""
Tests for choosing guesses.
"""

import unittest

from wordle_race.constants import FALLBACK_GUESS
from wordle_race.pool import CandidatePool
from wordle_race.scorer import (
    GuessScorer,
    ScoringParameters,
    WordScore,
    letter_frequency,
    positional_letter_frequency,
    score_word,
)
from wordle_race.words import WordBank


class TestFrequencies(unittest.TestCase):
    def test_letter_frequency(self) -> None:
        freq = letter_frequency(["ALLOW", "LLAMA"])
        # Once per word, however many times it appears in the word.
        self.assertEqual(freq["A"], 2)
        self.assertEqual(freq["L"], 2)
        self.assertEqual(freq["O"], 1)
        self.assertEqual(freq["M"], 1)
        self.assertEqual(freq["Z"], 0)

    def test_positional_letter_frequency(self) -> None:
        freq = positional_letter_frequency(["ALLOW", "LLAMA"])
        self.assertEqual(len(freq), 5)
        self.assertEqual(freq[0], {"A": 1, "L": 1})
        self.assertEqual(freq[1], {"L": 2})
        self.assertEqual(freq[2], {"L": 1, "A": 1})
        self.assertEqual(freq[3], {"O": 1, "M": 1})
        self.assertEqual(freq[4], {"W": 1, "A": 1})


class TestScoreWord(unittest.TestCase):
    def test_distinct_letters(self) -> None:
        words = ["ABCDE", "ABCDF"]
        overall = letter_frequency(words)
        positional = positional_letter_frequency(words)
        # Four letters with frequency 2 everywhere, one with frequency 1.
        self.assertAlmostEqual(
            score_word("ABCDE", overall, positional, len(words)), 9.0)

    def test_repeat_penalty(self) -> None:
        overall = {"A": 10, "B": 10, "C": 10, "D": 10}
        positional = [{"A": 5}, {"A": 5}, {"B": 5}, {"C": 5}, {"D": 5}]
        # Each distinct letter: 10 * 0.4 + 5 * 0.6 = 7. The second A is not
        # scored. Then scaled by 4/5.
        self.assertAlmostEqual(
            score_word("AABCD", overall, positional, 10), 22.4)
        # More than 10 candidates, so penalized.
        self.assertAlmostEqual(
            score_word("AABCD", overall, positional, 11), 17.92)

    def test_parameters(self) -> None:
        overall = {"A": 10, "B": 10, "C": 10, "D": 10}
        positional = [{"A": 5}, {"A": 5}, {"B": 5}, {"C": 5}, {"D": 5}]
        params = ScoringParameters(overall_weight=1.0, positional_weight=0.0,
                                   repeat_penalty=0.5, penalty_threshold=0)
        self.assertAlmostEqual(
            score_word("AABCD", overall, positional, 1, params), 16.0)

    def test_bad_parameters(self) -> None:
        with self.assertRaises(ValueError):
            ScoringParameters(scan_limit=0)


class TestSelectBestGuess(unittest.TestCase):
    def setUp(self) -> None:
        self.scorer = GuessScorer()

    def test_empty(self) -> None:
        self.assertEqual(
            self.scorer.select_best_guess(CandidatePool([]), 3),
            FALLBACK_GUESS
        )

    def test_single(self) -> None:
        pool = CandidatePool(["QUEEN"])
        self.assertEqual(self.scorer.select_best_guess(pool, 0), "QUEEN")
        self.assertEqual(self.scorer.select_best_guess(pool, 4), "QUEEN")

    def test_opening_book(self) -> None:
        pool = CandidatePool(WordBank.load().solver_words)
        assert "SALET" in pool
        self.assertEqual(self.scorer.select_best_guess(pool, 0), "SALET")

    def test_opening_book_order(self) -> None:
        pool = CandidatePool(["ABOUT", "TRACE", "CRATE", "WATER"])
        self.assertEqual(self.scorer.select_best_guess(pool, 0), "CRATE")

    def test_opening_book_first_turn_only(self) -> None:
        pool = CandidatePool(["AXXXX", "BCDEF", "BCDEG", "SALET"])
        self.assertEqual(self.scorer.select_best_guess(pool, 0), "SALET")
        self.assertNotEqual(self.scorer.select_best_guess(pool, 1), "SALET")

    def test_no_opening_book_word(self) -> None:
        pool = CandidatePool(["AXXXX", "BCDEF", "BCDEG", "BCDEH"])
        self.assertEqual(self.scorer.select_best_guess(pool, 0), "BCDEF")

    def test_best_score(self) -> None:
        pool = CandidatePool(["AXXXX", "BCDEF", "BCDEG", "BCDEH"])
        self.assertEqual(self.scorer.select_best_guess(pool, 1), "BCDEF")

    def test_ties_go_to_first(self) -> None:
        pool = CandidatePool(["ABCDF", "ABCDE"])
        self.assertEqual(self.scorer.select_best_guess(pool, 1), "ABCDE")

    def test_scan_limit(self) -> None:
        pool = CandidatePool(["AXXXX", "BCDEF", "BCDEG", "BCDEH"])
        scorer = GuessScorer(ScoringParameters(scan_limit=1))
        self.assertEqual(scorer.select_best_guess(pool, 1), "AXXXX")

    def test_deterministic(self) -> None:
        words = WordBank.load().solver_words
        forwards = CandidatePool(words)
        backwards = CandidatePool(list(reversed(words.tolist())))
        self.assertEqual(self.scorer.select_best_guess(forwards, 1),
                         self.scorer.select_best_guess(backwards, 1))

    def test_rank(self) -> None:
        pool = CandidatePool(["AXXXX", "BCDEF", "BCDEG", "BCDEH"])
        ranked = self.scorer.rank(pool, top_n=2)
        self.assertEqual([ws.word for ws in ranked], ["BCDEF", "BCDEG"])
        self.assertAlmostEqual(ranked[0].score, 13.0)
        self.assertEqual(str(ranked[0]), "BCDEF (13.0)")


class TestWordScore(unittest.TestCase):
    def test_ordering(self) -> None:
        assert WordScore("AAAAA", 1.0) < WordScore("BBBBB", 2.0)
        assert WordScore("AAAAA", 2.0) == WordScore("BBBBB", 2.0)
        self.assertEqual(str(WordScore("CRANE", 12.3456)), "CRANE (12.3)")

    def test_significant_figures(self) -> None:
        self.assertEqual(str(WordScore("CRANE", 12.3456, sig_fig=2)),
                         "CRANE (12.0)")
        self.assertEqual(str(WordScore("CRANE", 12.3456, sig_fig=None)),
                         "CRANE (12.3456)")
