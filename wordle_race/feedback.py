"""
Feedback: how a guess compares to the secret word, letter by letter.

Wordle's rule for repeated letters is that each letter of the secret can only
"explain" one letter of the guess. Exact matches are reserved first; other
letters of the guess are then marked as present, left to right, while unused
copies of that letter remain in the secret. For example, with the secret
ALLOW, the guess LLAMA scores ``-=-__``: the second L is correct, the first L
uses up the secret's other L, the first A uses up its only A, and the final A
is absent.
"""

from collections import Counter
from enum import Enum
from typing import List, Sequence, Tuple

from colors import color  # pip install ansicolors

from wordle_race.constants import (
    CHAR_ABSENT,
    CHAR_CORRECT,
    CHAR_PRESENT,
    COLOUR_ABSENT,
    COLOUR_CORRECT,
    COLOUR_PRESENT,
    FEEDBACK_REGEX,
    WORD_REGEX,
    WORDLEN,
)

FEEDBACK_TYPE = Tuple["LetterStatus", ...]


# =============================================================================
# Enums
# =============================================================================

class LetterStatus(Enum):
    """
    Possible types of feedback about each letter.
    """
    ABSENT = 1
    PRESENT = 2
    CORRECT = 3

    @property
    def plain_str(self) -> str:
        """
        Plain string representation.
        """
        if self == LetterStatus.ABSENT:
            return CHAR_ABSENT
        elif self == LetterStatus.PRESENT:
            return CHAR_PRESENT
        elif self == LetterStatus.CORRECT:
            return CHAR_CORRECT
        else:
            raise AssertionError("bug")

    @classmethod
    def from_char(cls, c: str) -> "LetterStatus":
        if c == CHAR_ABSENT:
            return cls.ABSENT
        elif c == CHAR_PRESENT:
            return cls.PRESENT
        elif c == CHAR_CORRECT:
            return cls.CORRECT
        raise ValueError(f"Bad feedback character: {c!r}")


ALL_CORRECT = (LetterStatus.CORRECT, ) * WORDLEN


# =============================================================================
# Evaluation
# =============================================================================

def evaluate(guess: str, secret: str) -> FEEDBACK_TYPE:
    """
    Compares a guess to the secret and returns the status of each letter of
    the guess. Both must be words of the correct length.
    """
    assert len(guess) == WORDLEN and len(secret) == WORDLEN, (
        f"Can't compare {guess!r} with {secret!r}"
    )
    statuses = [LetterStatus.ABSENT] * WORDLEN  # type: List[LetterStatus]
    available = Counter(secret)
    # Reserve exact matches first.
    for pos in range(WORDLEN):
        if guess[pos] == secret[pos]:
            statuses[pos] = LetterStatus.CORRECT
            available[guess[pos]] -= 1
    # Then, in sequence, anything left over.
    for pos in range(WORDLEN):
        if statuses[pos] == LetterStatus.CORRECT:
            continue
        letter = guess[pos]
        if available[letter] > 0:
            statuses[pos] = LetterStatus.PRESENT
            available[letter] -= 1
    return tuple(statuses)


def feedback_str(feedback: Sequence[LetterStatus]) -> str:
    """
    Plain string version of feedback, e.g. ``=-__=``.
    """
    return "".join(f.plain_str for f in feedback)


def feedback_from_str(s: str) -> FEEDBACK_TYPE:
    """
    Create coded feedback from a plain string.
    """
    if not FEEDBACK_REGEX.match(s):
        raise ValueError(f"Bad feedback string: {s!r}")
    return tuple(LetterStatus.from_char(c) for c in s)


def is_all_correct(feedback: Sequence[LetterStatus]) -> bool:
    return tuple(feedback) == ALL_CORRECT


def colourful_char(x: str, status: LetterStatus) -> str:
    """
    Returns a string with ANSI codes to colour the character according to the
    feedback (and then reset afterwards).
    """
    if status == LetterStatus.ABSENT:
        colour_params = COLOUR_ABSENT
    elif status == LetterStatus.PRESENT:
        colour_params = COLOUR_PRESENT
    elif status == LetterStatus.CORRECT:
        colour_params = COLOUR_CORRECT
    else:
        raise AssertionError("bug")
    return color(x, **colour_params)


# =============================================================================
# Clue
# =============================================================================

class Clue:
    """
    Represents a guessed word and its feedback: one row of the board.
    """

    def __init__(self, word: str, feedback: Sequence[LetterStatus]) -> None:
        """
        Args:

            word: the word that was guessed
            feedback: letter-by-letter feedback
        """
        assert len(word) == WORDLEN
        assert len(feedback) == WORDLEN
        self.word = word.upper()
        self.feedback = tuple(feedback)  # type: FEEDBACK_TYPE

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @classmethod
    def from_known_word(cls, guess: str, secret: str) -> "Clue":
        """
        The clue that the secret would give for this guess.
        """
        guess = guess.upper()
        return cls(guess, evaluate(guess, secret.upper()))

    @classmethod
    def from_strings(cls, guess: str, feedback_string: str) -> "Clue":
        """
        Use our internal string format to create a clue object.
        """
        if not WORD_REGEX.match(guess):
            raise ValueError(f"Bad word: {guess!r}")
        return cls(guess, feedback_from_str(feedback_string))

    # -------------------------------------------------------------------------
    # Info
    # -------------------------------------------------------------------------

    def correct(self) -> bool:
        """
        Was the guess correct?
        """
        return is_all_correct(self.feedback)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clue):
            return NotImplemented
        return self.word == other.word and self.feedback == other.feedback

    def __hash__(self) -> int:
        return hash((self.word, self.feedback))

    # -------------------------------------------------------------------------
    # Displays and string representations
    # -------------------------------------------------------------------------

    @property
    def colourful_str(self) -> str:
        """
        Colourful string representation.
        """
        return "".join(
            colourful_char(c, f)
            for c, f in zip(self.word, self.feedback)
        )

    @property
    def feedback_str(self) -> str:
        return feedback_str(self.feedback)

    @property
    def plain_str(self) -> str:
        """
        Plain string representation.
        """
        return f"{self.word}/{self.feedback_str}"

    def __str__(self) -> str:
        """
        The colourful one leaves a colour residue for logs.
        """
        return self.plain_str

    def __repr__(self) -> str:
        return f"Clue({self.word!r}, {self.feedback_str!r})"
