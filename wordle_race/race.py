"""
A race: a human player and the solver guess the same secret word.

The solver keeps in step with the player. It only makes its next guess once
the player has made more guesses than it has, after a short pause so that a
person watching can follow it.
"""

import logging
import random
import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from wordle_race.constants import (
    BLANK_ROW,
    DEFAULT_BOT_DELAY_S,
    DEFAULT_COUNT_THRESHOLD,
    DEFAULT_SHOW_THRESHOLD,
    N_GUESSES,
    WORD_REGEX,
    WORDLEN,
)
from wordle_race.feedback import Clue
from wordle_race.scorer import GuessScorer
from wordle_race.solver import SolverLoop, SolverOutcome, SolverSnapshot
from wordle_race.words import WordBank

log = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class WordNotFoundError(ValueError):
    """
    The player guessed something that isn't in the word list.
    """
    pass


class GameNotStartedError(RuntimeError):
    """
    The player tried to move with no game running.
    """
    pass


# =============================================================================
# Results
# =============================================================================

class RaceResult(Enum):
    IN_PROGRESS = "in progress"
    TIE = "It's a tie!"
    BOT_WINS = "Bot wins!"
    PLAYER_WINS = "You win!"
    NOBODY_WINS = "Nobody wins."


# =============================================================================
# Rendering
# =============================================================================

def render_row(clue: Optional[Clue], colour: bool = True) -> str:
    if clue is None:
        return BLANK_ROW
    return clue.colourful_str if colour else clue.word


def render_board(history: Sequence[Clue],
                 n_rows: int = N_GUESSES,
                 colour: bool = True) -> List[str]:
    """
    One string per row; rows not yet played are blank.
    """
    rows = list(history) + [None] * (n_rows - len(history))
    return [render_row(clue, colour=colour) for clue in rows]


def render_boards_side_by_side(player: Sequence[Clue],
                               bot: Sequence[Clue],
                               colour: bool = True,
                               gap: int = 8) -> str:
    spacer = " " * gap
    lines = [f"{'You':<{WORDLEN}}{spacer}Bot"]
    for p, b in zip(render_board(player, colour=colour),
                    render_board(bot, colour=colour)):
        lines.append(f"{p}{spacer}{b}")
    return "\n".join(lines)


def describe_pool(snapshot: SolverSnapshot,
                  show_threshold: int = DEFAULT_SHOW_THRESHOLD,
                  count_threshold: int = DEFAULT_COUNT_THRESHOLD) -> str:
    """
    The solver's status: "Won!" or "Lost" once it has finished. Otherwise,
    "N possible" when there are ``count_threshold`` or fewer candidates left,
    and the candidates themselves when there are ``show_threshold`` or fewer
    (provided the snapshot carries them). Empty if there's nothing to say.
    """
    if snapshot.outcome == SolverOutcome.WON:
        return "Won!"
    if snapshot.outcome == SolverOutcome.LOST:
        return "Lost"
    n = snapshot.n_remaining
    parts = []  # type: List[str]
    if 0 < n <= count_threshold:
        parts.append(f"{n} possible")
    if 0 < n <= show_threshold and snapshot.remaining is not None:
        parts.append(f"Possible: {', '.join(snapshot.remaining)}")
    return ". ".join(parts)


# =============================================================================
# RaceGame
# =============================================================================

class RaceGame:
    """
    One human against the solver, for as many games as they like.
    """

    def __init__(self,
                 bank: WordBank,
                 scorer: GuessScorer = None,
                 rng: random.Random = None,
                 bot_delay_s: float = DEFAULT_BOT_DELAY_S,
                 show_threshold: int = DEFAULT_SHOW_THRESHOLD,
                 sleep: Callable[[float], None] = time.sleep) -> None:
        self.bank = bank
        self.rng = rng or random.Random()
        self.bot_delay_s = bot_delay_s
        self.sleep = sleep
        self.show_threshold = show_threshold
        self.bot_won = False
        self.solver = SolverLoop(bank.solver_words, scorer=scorer,
                                 on_win=self._on_bot_win,
                                 show_threshold=show_threshold)
        self.started = False
        self.secret = ""
        self.player_history = []  # type: List[Clue]
        self.player_won = False

    def _on_bot_win(self, snapshot: SolverSnapshot) -> None:
        log.debug(f"Bot won: {snapshot}")
        self.bot_won = True

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start_new_game(self, secret: str = None) -> None:
        """
        Picks a secret (unless one is given) and resets both players.
        """
        self.secret = (secret or self.bank.random_secret(self.rng)).upper()
        self.player_history = []
        self.player_won = False
        self.bot_won = False
        self.solver.start(self.secret)
        self.started = True
        log.debug("New game started")

    # -------------------------------------------------------------------------
    # Info
    # -------------------------------------------------------------------------

    @property
    def player_attempt(self) -> int:
        return len(self.player_history)

    @property
    def player_over(self) -> bool:
        return self.player_won or self.player_attempt >= N_GUESSES

    @property
    def bot_attempt(self) -> int:
        return self.solver.turn

    def bot_may_move(self) -> bool:
        return (
            self.started
            and self.solver.outcome == SolverOutcome.IN_PROGRESS
            and self.player_attempt > self.bot_attempt
        )

    @property
    def result(self) -> RaceResult:
        if not self.started or not self.player_over or self.bot_may_move():
            return RaceResult.IN_PROGRESS
        if self.player_won and self.bot_won:
            return RaceResult.TIE
        if self.bot_won:
            return RaceResult.BOT_WINS
        if self.player_won:
            return RaceResult.PLAYER_WINS
        return RaceResult.NOBODY_WINS

    # -------------------------------------------------------------------------
    # Moves
    # -------------------------------------------------------------------------

    def submit_player_guess(self, word: str) -> Clue:
        """
        Records the player's guess. Raises :exc:`WordNotFoundError`, leaving
        the board alone, if it isn't an acceptable word.
        """
        if not self.started or self.player_over:
            raise GameNotStartedError("No game in progress for the player")
        word = word.strip().upper()
        if not WORD_REGEX.match(word) or not self.bank.is_acceptable(word):
            raise WordNotFoundError(f"Word not found: {word}")
        clue = Clue.from_known_word(word, self.secret)
        self.player_history.append(clue)
        if clue.correct():
            self.player_won = True
        return clue

    def advance_bot(self) -> Optional[Clue]:
        """
        If it's the solver's turn, pauses, then makes one solver guess.
        """
        if not self.bot_may_move():
            return None
        if self.bot_delay_s > 0:
            self.sleep(self.bot_delay_s)
        return self.solver.take_turn()

    def catch_up_bot(self) -> List[Clue]:
        clues = []  # type: List[Clue]
        while self.bot_may_move():
            clues.append(self.advance_bot())
        return clues

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def render(self, colour: bool = True) -> str:
        bot = self.solver.snapshot()
        lines = [render_boards_side_by_side(self.player_history, bot.history,
                                            colour=colour)]
        status = describe_pool(bot, show_threshold=self.show_threshold)
        if status:
            lines.append(f"Bot: {status}")
        return "\n".join(lines)


# =============================================================================
# Interactive play
# =============================================================================

def play_interactive(game: RaceGame,
                     input_fn: Callable[[str], str] = input,
                     output_fn: Callable[[str], None] = print,
                     colour: bool = True) -> None:
    """
    Plays games at the terminal until the user has had enough.
    """
    output_fn("Race against the bot to guess the 5-letter word.")
    try:
        while True:
            game.start_new_game()
            while not game.player_over:
                output_fn(game.render(colour=colour))
                word = input_fn(
                    f"Guess {game.player_attempt + 1} of {N_GUESSES}: "
                )
                try:
                    game.submit_player_guess(word)
                except WordNotFoundError:
                    output_fn("Word not found")
                    continue
                game.catch_up_bot()
            output_fn(game.render(colour=colour))
            output_fn(f"The word was {game.secret}. {game.result.value}")
            again = input_fn("New game? (y/n): ").strip().lower()
            if again != "y":
                return
    except (EOFError, KeyboardInterrupt):
        output_fn("")
        if game.started and game.result == RaceResult.IN_PROGRESS:
            output_fn(f"Abandoned. The word was {game.secret}.")
        log.debug("Input ended; leaving")
