"""
Constants defining the game and the defaults used across the package.
"""

import os
import re
from multiprocessing import cpu_count

# =============================================================================
# Paths
# =============================================================================

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(THIS_DIR, "data")
DEFAULT_OS_DICT = "/usr/share/dict/words"
DEFAULT_SECRETS_FILENAME = os.path.join(DATA_DIR, "answers.txt")
DEFAULT_ACCEPTABLE_FILENAME = os.path.join(DATA_DIR, "guesses.txt")

# =============================================================================
# Defining the game
# =============================================================================

WORDLEN = 5
N_GUESSES = 6

# Regular expressions to read from files or the user
WORD_REGEX = re.compile(rf"^[A-Z]{{{WORDLEN}}}$", re.IGNORECASE)
CHAR_ABSENT = "_"
CHAR_PRESENT = "-"
CHAR_CORRECT = "="
_FEEDBACK_REGEX_STR = (
    rf"^[\{CHAR_ABSENT}"
    rf"\{CHAR_PRESENT}"
    rf"\{CHAR_CORRECT}]{{{WORDLEN}}}$"
)
FEEDBACK_REGEX = re.compile(_FEEDBACK_REGEX_STR)

# Colours and styles for displaying guesses, via the ansicolors package
COLOUR_ABSENT = dict(fg="white", bg="black", style="bold")
COLOUR_PRESENT = dict(fg="white", bg="yellow", style="bold")
COLOUR_CORRECT = dict(fg="white", bg="green", style="bold")
BLANK_ROW = "." * WORDLEN

# =============================================================================
# Guessing
# =============================================================================

# Strong first guesses, in order of preference.
OPENING_BOOK = ("SALET", "REAST", "CRATE", "TRACE", "SLATE", "AROSE")
# Played when nothing in the dictionary is consistent with the clues.
FALLBACK_GUESS = "AROSE"

DEFAULT_OVERALL_WEIGHT = 0.4
DEFAULT_POSITIONAL_WEIGHT = 0.6
DEFAULT_REPEAT_PENALTY = 0.8
DEFAULT_SCAN_LIMIT = 100
DEFAULT_PENALTY_THRESHOLD = 10

# =============================================================================
# Presentation and hosting
# =============================================================================

DEFAULT_SHOW_THRESHOLD = 10
DEFAULT_COUNT_THRESHOLD = 50
DEFAULT_ADVICE_TOP_N = 5
DEFAULT_BOT_DELAY_S = 0.5
DEFAULT_SIG_FIGURES = 3
DEFAULT_NPROC = cpu_count()

# Used when the word lists can't be read.
FALLBACK_WORDS = (
    "ABOUT", "AROSE", "BRAVE", "CHAIR", "CRANE", "CRATE", "DREAM", "EARTH",
    "FLAME", "GHOST", "GRAPE", "HEART", "HOUSE", "LIGHT", "MONEY", "MUSIC",
    "NIGHT", "OCEAN", "PAPER", "PLANT", "QUEEN", "RIVER", "ROBOT", "SALET",
    "SLATE", "SMILE", "STONE", "TABLE", "TRACE", "WATER", "WORLD", "YOUTH",
)
