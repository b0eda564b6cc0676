"""
The automatic solver: a state machine that makes one guess per turn.

The host decides when the solver moves (for example, only after a human
opponent has made a guess) and calls :meth:`SolverLoop.take_turn`. Turns for a
game must be requested one at a time. Starting a new game discards the old
state entirely.
"""

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from wordle_race.constants import (
    DEFAULT_ADVICE_TOP_N,
    DEFAULT_SHOW_THRESHOLD,
    N_GUESSES,
)
from wordle_race.feedback import Clue, evaluate, is_all_correct
from wordle_race.pool import CandidatePool
from wordle_race.scorer import GuessScorer, WordScore

log = logging.getLogger(__name__)

WIN_CALLBACK_TYPE = Callable[["SolverSnapshot"], None]


# =============================================================================
# Exceptions
# =============================================================================

class SolverNotRunningError(RuntimeError):
    """
    A turn was requested while no game is in progress.
    """
    pass


# =============================================================================
# State
# =============================================================================

class SolverOutcome(Enum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    WON = "won"
    LOST = "lost"

    @property
    def finished(self) -> bool:
        return self in (SolverOutcome.WON, SolverOutcome.LOST)


class SolverState:
    """
    Everything about one game from the solver's point of view. Owned and
    changed only by :class:`SolverLoop`.
    """

    def __init__(self, secret: str, pool: CandidatePool) -> None:
        self.secret = secret
        self.pool = pool
        self.turn = 0
        self.outcome = SolverOutcome.IN_PROGRESS
        self.history = []  # type: List[Clue]


class SolverSnapshot:
    """
    Read-only view of the solver's state, for display.
    """

    def __init__(self,
                 outcome: SolverOutcome,
                 turn: int,
                 history: Iterable[Clue],
                 n_remaining: int,
                 remaining: Optional[Tuple[str, ...]] = None) -> None:
        """
        Args:
            outcome: where the game stands
            turn: number of guesses made
            history: the guesses made, with their feedback
            n_remaining: number of candidates still possible
            remaining: the candidates, if few enough to show
        """
        self.outcome = outcome
        self.turn = turn
        self.history = tuple(history)
        self.n_remaining = n_remaining
        self.remaining = remaining

    @property
    def guesses(self) -> List[str]:
        return [clue.word for clue in self.history]

    @property
    def won(self) -> bool:
        return self.outcome == SolverOutcome.WON

    def __str__(self) -> str:
        clues = ", ".join(str(c) for c in self.history) or "none"
        return (
            f"{self.outcome.value}; {self.turn} guess(es): {clues}; "
            f"{self.n_remaining} candidate(s) left"
        )


# =============================================================================
# The state machine
# =============================================================================

class SolverLoop:
    """
    Plays one game at a time against a known secret.
    """

    def __init__(self,
                 words: Iterable[str],
                 scorer: GuessScorer = None,
                 on_win: WIN_CALLBACK_TYPE = None,
                 show_threshold: int = DEFAULT_SHOW_THRESHOLD) -> None:
        """
        Args:
            words: the dictionary; every game starts with all of these
            scorer: chooses guesses
            on_win: called once, with a snapshot, when the solver wins
            show_threshold: snapshots list the remaining candidates when
                there are this many or fewer
        """
        self.dictionary = CandidatePool(words)
        if self.dictionary.is_empty:
            raise ValueError("The solver needs at least one word")
        self.scorer = scorer or GuessScorer()
        self.on_win = on_win
        self.show_threshold = show_threshold
        self._state = None  # type: Optional[SolverState]

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self, secret: str) -> None:
        """
        Begins a new game, abandoning any game in progress.
        """
        secret = secret.upper()
        if secret not in self.dictionary:
            log.warning(f"Secret {secret} is not in the solver's dictionary")
        # The dictionary pool is never modified, so can be shared.
        self._state = SolverState(secret, self.dictionary)
        log.debug(f"Solver starting with {len(self.dictionary)} candidates")

    def reset(self) -> None:
        """
        Back to the "not started" state.
        """
        self._state = None

    # -------------------------------------------------------------------------
    # Info
    # -------------------------------------------------------------------------

    @property
    def outcome(self) -> SolverOutcome:
        if self._state is None:
            return SolverOutcome.NOT_STARTED
        return self._state.outcome

    @property
    def turn(self) -> int:
        return self._state.turn if self._state else 0

    @property
    def n_remaining(self) -> int:
        if self._state is None:
            return len(self.dictionary)
        return len(self._state.pool)

    def snapshot(self) -> SolverSnapshot:
        state = self._state
        if state is None:
            return SolverSnapshot(SolverOutcome.NOT_STARTED, 0, [],
                                  len(self.dictionary))
        n = len(state.pool)
        remaining = state.pool.words if n <= self.show_threshold else None
        return SolverSnapshot(state.outcome, state.turn, state.history, n,
                              remaining)

    def suggestions(self,
                    top_n: int = DEFAULT_ADVICE_TOP_N) -> List[WordScore]:
        """
        The best-scoring candidates at this point, for display.
        """
        if self._state is None:
            return []
        return self.scorer.rank(self._state.pool, top_n)

    # -------------------------------------------------------------------------
    # Playing
    # -------------------------------------------------------------------------

    def take_turn(self) -> Clue:
        """
        Makes one guess, and returns it with its feedback.
        """
        state = self._state
        if state is None or state.outcome != SolverOutcome.IN_PROGRESS:
            raise SolverNotRunningError(
                f"Can't take a turn: game is {self.outcome.value}")
        guess = self.scorer.select_best_guess(state.pool, state.turn)
        clue = Clue(guess, evaluate(guess, state.secret))
        state.history.append(clue)
        state.turn += 1
        log.debug(f"Solver guess {state.turn}: {clue} "
                  f"(from {len(state.pool)} candidates)")
        if is_all_correct(clue.feedback):
            state.outcome = SolverOutcome.WON
            log.info(f"Solver found {state.secret} in {state.turn} "
                     f"guess(es)")
            if self.on_win is not None:
                self.on_win(self.snapshot())
        elif state.turn >= N_GUESSES:
            state.outcome = SolverOutcome.LOST
            log.info(f"Solver failed to find {state.secret}")
        else:
            state.pool = state.pool.filter(guess, clue.feedback)
        return clue

    def play(self, secret: str) -> SolverSnapshot:
        """
        Plays a whole game.
        """
        self.start(secret)
        while self.outcome == SolverOutcome.IN_PROGRESS:
            self.take_turn()
        return self.snapshot()


def autosolve(secret: str,
              words: Iterable[str],
              scorer: GuessScorer = None) -> SolverSnapshot:
    """
    Automatically solves for a secret, returning the final state.
    """
    return SolverLoop(words, scorer=scorer).play(secret)
