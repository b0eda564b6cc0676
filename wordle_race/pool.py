"""
The pool of words that might still be the secret.
"""

import logging
from typing import FrozenSet, Iterable, Iterator, Optional, Sequence, Tuple

from wordle_race.feedback import LetterStatus, evaluate

log = logging.getLogger(__name__)


class CandidatePool:
    """
    Words consistent with all the feedback received so far.

    Words are held in sorted order, so that iteration (and thus tie-breaking
    when scoring) is reproducible.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words = tuple(sorted(set(str(w).upper() for w in words)))
        self._wordset = None  # type: Optional[FrozenSet[str]]

    @classmethod
    def _from_sorted(cls, words: Sequence[str]) -> "CandidatePool":
        pool = cls.__new__(cls)
        pool._words = tuple(words)
        pool._wordset = None
        return pool

    # -------------------------------------------------------------------------
    # Container behaviour
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        if self._wordset is None:
            self._wordset = frozenset(self._words)
        return word in self._wordset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidatePool):
            return NotImplemented
        return self._words == other._words

    def __repr__(self) -> str:
        return f"CandidatePool(<{len(self)} words>)"

    @property
    def words(self) -> Tuple[str, ...]:
        """
        All words, in sorted order.
        """
        return self._words

    @property
    def is_empty(self) -> bool:
        return not self._words

    @property
    def first(self) -> Optional[str]:
        """
        First word in sorted order (meaningful mainly if there is just one).
        """
        return self._words[0] if self._words else None

    # -------------------------------------------------------------------------
    # Elimination
    # -------------------------------------------------------------------------

    def filter(self, guess: str,
               feedback: Sequence[LetterStatus]) -> "CandidatePool":
        """
        Returns a new pool, keeping only the words that would have given
        exactly this feedback for this guess, had they been the secret.
        """
        feedback = tuple(feedback)
        kept = [w for w in self._words if evaluate(guess, w) == feedback]
        log.debug(f"Guess {guess} kept {len(kept)} of {len(self)} words")
        return self._from_sorted(kept)

    def prune(self, guess: str, feedback: Sequence[LetterStatus]) -> int:
        """
        As for :meth:`filter`, but in place. Returns the number of words
        eliminated.
        """
        n_before = len(self)
        self._words = self.filter(guess, feedback)._words
        self._wordset = None
        return n_before - len(self)
