"""
Word lists.

There are two: words that may be the secret, and other words that are
acceptable as guesses. Both are plain text files with one word per line.
"""

import logging
import random
from typing import Iterable, List, Set

import numpy as np

from wordle_race.constants import (
    DEFAULT_ACCEPTABLE_FILENAME,
    DEFAULT_SECRETS_FILENAME,
    FALLBACK_WORDS,
    WORD_REGEX,
    WORDLEN,
)

log = logging.getLogger(__name__)


# =============================================================================
# Words
# =============================================================================

def make_word(x: str) -> str:
    """
    Validates and normalizes (to upper case) a word.
    """
    word = x.strip()
    if not WORD_REGEX.match(word):
        raise ValueError(f"Not a {WORDLEN}-letter word: {x!r}")
    return word.upper()


def make_np_array_words(words: Iterable[str]) -> np.ndarray:
    """
    Converts to a sorted Numpy array of unique words.
    """
    return np.array(sorted(set(words)), dtype=f"U{WORDLEN}")


# =============================================================================
# Reading word lists
# =============================================================================

def make_wordlist(from_filename: str,
                  to_filename: str) -> None:
    """
    Reads a dictionary file and creates a list of 5-letter words.
    """
    log.info(f"Reading from {from_filename}")
    log.info(f"Writing to {to_filename}")
    n_read = 0
    n_written = 0
    seen = set()  # type: Set[str]
    with open(from_filename, "rt") as f, open(to_filename, "wt") as t:
        for line in f:
            n_read += 1
            word = line.strip()
            if WORD_REGEX.match(word):
                uppercase_word = word.upper()
                if uppercase_word not in seen:
                    t.write(uppercase_word + "\n")
                    seen.add(uppercase_word)
                    n_written += 1
    log.info(f"Read {n_read} words from {from_filename}")
    log.info(f"Wrote {n_written} ({WORDLEN}-letter) words to {to_filename}")


def read_words(wordlist_filename: str,
               max_n: int = None) -> np.ndarray:
    """
    Reads words from a word list file. Blank lines are ignored; other lines
    that aren't words are skipped with a warning.
    """
    words = []  # type: List[str]
    with open(wordlist_filename, encoding="utf-8") as f:
        for line in f:
            text = line.strip()
            if not text:
                continue
            if not WORD_REGEX.match(text):
                log.warning(f"Skipping {text!r} in {wordlist_filename}")
                continue
            words.append(text.upper())
            if max_n is not None and len(words) >= max_n:
                log.warning(f"Reading only {len(words)} words")
                break
    return make_np_array_words(words)


# =============================================================================
# WordBank
# =============================================================================

class WordBank:
    """
    The words for a game.
    """

    def __init__(self, acceptable: Iterable[str],
                 secrets: Iterable[str]) -> None:
        """
        Args:
            acceptable: words that may be guessed (secrets are added to these)
            secrets: words that may be chosen as the secret
        """
        self.secrets = make_np_array_words(make_word(w) for w in secrets)
        if self.secrets.size == 0:
            raise ValueError("No possible secret words")
        self.acceptable = make_np_array_words(
            [make_word(w) for w in acceptable] + list(self.secrets)
        )
        self._acceptable_set = frozenset(self.acceptable.tolist())

    def __str__(self) -> str:
        return (
            f"{self.secrets.size} possible secrets, "
            f"{self.acceptable.size} acceptable guesses"
        )

    @property
    def solver_words(self) -> np.ndarray:
        """
        Words for the solver to consider: everything acceptable.
        """
        return self.acceptable

    def is_acceptable(self, word: str) -> bool:
        return word.upper() in self._acceptable_set

    def random_secret(self, rng: random.Random = None) -> str:
        rng = rng or random
        return str(rng.choice(self.secrets.tolist()))

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @classmethod
    def fallback(cls) -> "WordBank":
        """
        A small built-in list.
        """
        return cls(acceptable=FALLBACK_WORDS, secrets=FALLBACK_WORDS)

    @classmethod
    def load(cls,
             acceptable_filename: str = DEFAULT_ACCEPTABLE_FILENAME,
             secrets_filename: str = DEFAULT_SECRETS_FILENAME,
             max_n: int = None) -> "WordBank":
        """
        Loads word lists from files, or, if that fails, uses the fallback
        list.
        """
        try:
            secrets = read_words(secrets_filename, max_n=max_n)
            acceptable = read_words(acceptable_filename)
        except (OSError, UnicodeDecodeError) as e:
            log.error(f"Can't read word lists ({e}); using built-in words")
            return cls.fallback()
        if secrets.size == 0:
            log.error(f"No words in {secrets_filename}; using built-in words")
            return cls.fallback()
        bank = cls(acceptable=acceptable, secrets=secrets)
        log.info(f"Word bank: {bank}")
        return bank
