"""
Choosing the next guess.

The score of a word rewards letters that are common amongst the remaining
candidates, both anywhere in a word and at the particular position, and
rewards words with many different letters (repeated letters tell us less).
This is a greedy heuristic; it does not look ahead.
"""

import logging
from collections import Counter
from functools import total_ordering
from typing import Any, Dict, Iterable, List, Optional, Sequence

from cardinal_pythonlib.maths_py import round_sf

from wordle_race.constants import (
    DEFAULT_ADVICE_TOP_N,
    DEFAULT_OVERALL_WEIGHT,
    DEFAULT_PENALTY_THRESHOLD,
    DEFAULT_POSITIONAL_WEIGHT,
    DEFAULT_REPEAT_PENALTY,
    DEFAULT_SCAN_LIMIT,
    DEFAULT_SIG_FIGURES,
    FALLBACK_GUESS,
    OPENING_BOOK,
    WORDLEN,
)
from wordle_race.pool import CandidatePool

log = logging.getLogger(__name__)


# =============================================================================
# Helper functions
# =============================================================================

def prettylist(words: Iterable[Any]) -> str:
    """
    Formats a wordlist.
    """
    return ", ".join(str(x) for x in words)


# =============================================================================
# Letter frequencies
# =============================================================================

def letter_frequency(words: Iterable[str]) -> Counter:
    """
    For each letter, the number of words in which it appears.

    A word contributes once per distinct letter, so THREE contributes only one
    E: feedback doesn't tell us more about a second copy of a letter than the
    first.
    """
    counter = Counter()
    for word in words:
        counter.update(set(word))
    return counter


def positional_letter_frequency(words: Iterable[str]) -> List[Counter]:
    """
    For each position, a counter of how many words have each letter there.
    """
    counters = [Counter() for _ in range(WORDLEN)]
    for word in words:
        for pos in range(WORDLEN):
            counters[pos][word[pos]] += 1
    return counters


# =============================================================================
# Parameters
# =============================================================================

class ScoringParameters:
    """
    Tunable constants for the guess heuristic. Their values were chosen by
    watching how often the solver wins, so they are configurable.
    """

    def __init__(self,
                 overall_weight: float = DEFAULT_OVERALL_WEIGHT,
                 positional_weight: float = DEFAULT_POSITIONAL_WEIGHT,
                 repeat_penalty: float = DEFAULT_REPEAT_PENALTY,
                 scan_limit: int = DEFAULT_SCAN_LIMIT,
                 penalty_threshold: int = DEFAULT_PENALTY_THRESHOLD,
                 opening_book: Sequence[str] = OPENING_BOOK,
                 fallback_guess: str = FALLBACK_GUESS) -> None:
        """
        Args:
            overall_weight:
                weight for how many candidates contain a letter at all
            positional_weight:
                weight for how many candidates have a letter at that position
            repeat_penalty:
                multiplier for words with repeated letters, while many
                candidates remain
            scan_limit:
                maximum number of candidates to score per turn
            penalty_threshold:
                the repeat penalty applies only when more candidates than this
                remain
            opening_book:
                first guesses, in order of preference
            fallback_guess:
                guess to make if no candidates remain
        """
        if scan_limit < 1:
            raise ValueError(f"scan_limit must be positive, not {scan_limit}")
        self.overall_weight = overall_weight
        self.positional_weight = positional_weight
        self.repeat_penalty = repeat_penalty
        self.scan_limit = scan_limit
        self.penalty_threshold = penalty_threshold
        self.opening_book = tuple(w.upper() for w in opening_book)
        self.fallback_guess = fallback_guess.upper()

    def __repr__(self) -> str:
        return (
            f"ScoringParameters(overall_weight={self.overall_weight}, "
            f"positional_weight={self.positional_weight}, "
            f"repeat_penalty={self.repeat_penalty}, "
            f"scan_limit={self.scan_limit}, "
            f"penalty_threshold={self.penalty_threshold}, "
            f"opening_book={self.opening_book}, "
            f"fallback_guess={self.fallback_guess!r})"
        )


DEFAULT_PARAMETERS = ScoringParameters()


# =============================================================================
# Scoring a single word
# =============================================================================

def score_word(word: str,
               overall_freq: Dict[str, int],
               positional_freq: Sequence[Dict[str, int]],
               n_candidates: int,
               params: ScoringParameters = DEFAULT_PARAMETERS) -> float:
    """
    How good would this word be as the next guess? Higher is better.

    Each distinct letter scores (at the position where it first occurs) a
    weighted sum of its overall and positional frequencies. The total is
    scaled by the proportion of distinct letters, and penalized further for
    repeated letters while many candidates remain.
    """
    seen = set()
    score = 0.0
    for pos, letter in enumerate(word):
        if letter in seen:
            continue
        seen.add(letter)
        score += (
            overall_freq.get(letter, 0) * params.overall_weight +
            positional_freq[pos].get(letter, 0) * params.positional_weight
        )
    n_distinct = len(seen)
    score *= n_distinct / WORDLEN
    if n_candidates > params.penalty_threshold and n_distinct < WORDLEN:
        score *= params.repeat_penalty
    return score


@total_ordering
class WordScore:
    """
    Class to represent the score for a potential guess, for display.
    """

    def __init__(self, word: str, score: float,
                 sig_fig: Optional[int] = DEFAULT_SIG_FIGURES) -> None:
        self.word = word
        self.score = score
        self.sig_fig = sig_fig

    def __str__(self) -> str:
        if self.sig_fig is not None:
            score_sf = round_sf(self.score, self.sig_fig)
        else:
            score_sf = self.score
        return f"{self.word} ({score_sf})"

    def __repr__(self) -> str:
        return f"WordScore({self.word!r}, {self.score!r})"

    def __eq__(self, other: "WordScore") -> bool:
        return self.score == other.score

    def __lt__(self, other: "WordScore") -> bool:
        return self.score < other.score


# =============================================================================
# Choosing a guess
# =============================================================================

class GuessScorer:
    """
    Picks guesses from a candidate pool. Stateless apart from its parameters.
    """

    def __init__(self, params: ScoringParameters = None) -> None:
        self.params = params or DEFAULT_PARAMETERS

    def opening_guess(self, pool: CandidatePool) -> Optional[str]:
        """
        The first word of the opening book that is in the pool, if any.
        """
        for word in self.params.opening_book:
            if word in pool:
                return word
        return None

    def score_candidates(self, pool: CandidatePool) -> List[WordScore]:
        """
        Scores the first few candidates (up to the scan limit), in pool order.
        Frequencies are calculated across the whole pool.
        """
        overall_freq = letter_frequency(pool)
        positional_freq = positional_letter_frequency(pool)
        n = len(pool)
        return [
            WordScore(word, score_word(word, overall_freq, positional_freq,
                                       n, self.params))
            for word in pool.words[:self.params.scan_limit]
        ]

    def select_best_guess(self, pool: CandidatePool, turn: int) -> str:
        """
        The key thinking function: what should we guess next?

        Args:
            pool: words that might be the secret
            turn: zero-based index of the guess about to be made
        """
        n = len(pool)
        if n == 0:
            log.warning(f"No candidates left; guessing "
                        f"{self.params.fallback_guess}")
            return self.params.fallback_guess
        if n == 1:
            return pool.first
        if turn == 0:
            opener = self.opening_guess(pool)
            if opener is not None:
                return opener
        best = None  # type: Optional[WordScore]
        for option in self.score_candidates(pool):
            # Strictly better only, so the first of equals wins.
            if best is None or option.score > best.score:
                best = option
        log.debug(f"Best of {min(n, self.params.scan_limit)} scored "
                  f"(from {n}): {best}")
        return best.word

    def rank(self, pool: CandidatePool,
             top_n: int = DEFAULT_ADVICE_TOP_N) -> List[WordScore]:
        """
        The best-scoring candidates, best first (ties in pool order).
        """
        # Stable, even with reverse=True.
        options = sorted(self.score_candidates(pool), reverse=True)
        return options[:top_n]
