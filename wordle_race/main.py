#!/usr/bin/env python
"""
Command-line entry point.

Play against the solver:

.. code-block:: bash

    wordle-race play

Watch the solver find a particular word:

.. code-block:: bash

    wordle-race autosolve CRANE

Test the solver against every possible secret:

.. code-block:: bash

    wordle-race test_performance --nproc 8

"""

import argparse
import logging
import random

from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from wordle_race.constants import (
    DEFAULT_ACCEPTABLE_FILENAME,
    DEFAULT_ADVICE_TOP_N,
    DEFAULT_BOT_DELAY_S,
    DEFAULT_NPROC,
    DEFAULT_OS_DICT,
    DEFAULT_OVERALL_WEIGHT,
    DEFAULT_PENALTY_THRESHOLD,
    DEFAULT_POSITIONAL_WEIGHT,
    DEFAULT_REPEAT_PENALTY,
    DEFAULT_SCAN_LIMIT,
    DEFAULT_SECRETS_FILENAME,
    DEFAULT_SHOW_THRESHOLD,
    FALLBACK_GUESS,
    OPENING_BOOK,
    WORDLEN,
)
from wordle_race.race import RaceGame, play_interactive
from wordle_race.scorer import GuessScorer, ScoringParameters, prettylist
from wordle_race.solver import SolverLoop, SolverOutcome
from wordle_race.words import WordBank, make_word, make_wordlist

rootlog = logging.getLogger(__name__)


# =============================================================================
# Commands
# =============================================================================

def autosolve_verbose(bank: WordBank,
                      secret: str,
                      scorer: GuessScorer,
                      show_threshold: int = DEFAULT_SHOW_THRESHOLD,
                      advice_top_n: int = DEFAULT_ADVICE_TOP_N) -> bool:
    """
    Solves for a secret, explaining each step. Returns: won?
    """
    secret = make_word(secret)
    solver = SolverLoop(bank.solver_words, scorer=scorer,
                        show_threshold=show_threshold)
    solver.start(secret)
    while solver.outcome == SolverOutcome.IN_PROGRESS:
        snapshot = solver.snapshot()
        pool_desc = (
            prettylist(snapshot.remaining) if snapshot.remaining is not None
            else f"not showing (>{show_threshold})"
        )
        rootlog.info(f"Guess {snapshot.turn + 1}: "
                     f"{snapshot.n_remaining} possible words: {pool_desc}")
        if snapshot.turn > 0:
            ranked = solver.suggestions(advice_top_n)
            rootlog.info(f"Top {advice_top_n} by score: {prettylist(ranked)}")
        clue = solver.take_turn()
        rootlog.info(f"Guessed {clue.colourful_str} ({clue})")
    final = solver.snapshot()
    rootlog.info(f"Solver {final.outcome.value} after {final.turn} "
                 f"guess(es): {prettylist(final.guesses)}")
    return final.won


# =============================================================================
# Command-line entry point
# =============================================================================

def main() -> None:
    # -------------------------------------------------------------------------
    # Arguments
    # -------------------------------------------------------------------------
    parser = argparse.ArgumentParser(
        "Wordle race: play against a solver, or watch it play.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--secrets_filename", default=DEFAULT_SECRETS_FILENAME,
        help=f"File containing the {WORDLEN}-letter words that may be the "
             f"secret"
    )
    parser.add_argument(
        "--acceptable_filename", default=DEFAULT_ACCEPTABLE_FILENAME,
        help=f"File containing other {WORDLEN}-letter words that may be "
             f"guessed"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Be verbose"
    )

    scoring = parser.add_argument_group("Scoring")
    scoring.add_argument(
        "--overall_weight", type=float, default=DEFAULT_OVERALL_WEIGHT,
        help="Weight for how many candidates contain a letter"
    )
    scoring.add_argument(
        "--positional_weight", type=float, default=DEFAULT_POSITIONAL_WEIGHT,
        help="Weight for how many candidates have a letter at that position"
    )
    scoring.add_argument(
        "--repeat_penalty", type=float, default=DEFAULT_REPEAT_PENALTY,
        help="Score multiplier for words with repeated letters"
    )
    scoring.add_argument(
        "--penalty_threshold", type=int, default=DEFAULT_PENALTY_THRESHOLD,
        help="Apply the repeat penalty only with more candidates than this"
    )
    scoring.add_argument(
        "--scan_limit", type=int, default=DEFAULT_SCAN_LIMIT,
        help="Maximum number of candidates to score per guess"
    )
    scoring.add_argument(
        "--opening_book", nargs="+", default=list(OPENING_BOOK),
        help="First guesses, in order of preference"
    )
    scoring.add_argument(
        "--fallback_guess", default=FALLBACK_GUESS,
        help="Guess to make when no candidates remain"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    cmd_make = "make_wordlist"
    parser_make = subparsers.add_parser(
        cmd_make,
        help="Make a word list from a dictionary file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_make.add_argument(
        "--source_dict", default=DEFAULT_OS_DICT,
        help="File of all dictionary words."
    )
    parser_make.add_argument(
        "--output", required=True,
        help="Word list file to write"
    )

    cmd_play = "play"
    parser_play = subparsers.add_parser(
        cmd_play,
        help="Race against the solver",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_play.add_argument(
        "--bot_delay", type=float, default=DEFAULT_BOT_DELAY_S,
        help="Pause (s) before each of the solver's guesses"
    )
    parser_play.add_argument(
        "--show_threshold", type=int, default=DEFAULT_SHOW_THRESHOLD,
        help="Show the solver's possibilities when there are this many or "
             "fewer left"
    )
    parser_play.add_argument(
        "--seed", type=int, default=None,
        help="Random number seed, for choosing secrets"
    )
    parser_play.add_argument(
        "--no_colour", action="store_true",
        help="Don't use colour"
    )

    cmd_autosolve = "autosolve"
    parser_autosolve = subparsers.add_parser(
        cmd_autosolve,
        help="Watch the solver find a word",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_autosolve.add_argument(
        "secret", type=str,
        help="The secret word"
    )
    parser_autosolve.add_argument(
        "--show_threshold", type=int, default=DEFAULT_SHOW_THRESHOLD,
        help="Show all possibilities when there are this many or fewer left"
    )
    parser_autosolve.add_argument(
        "--advice_top_n", type=int, default=DEFAULT_ADVICE_TOP_N,
        help="Show this many top-scoring candidates"
    )

    cmd_test_performance = "test_performance"
    parser_test_performance = subparsers.add_parser(
        cmd_test_performance,
        help="Solve every possible secret and report performance",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_test_performance.add_argument(
        "--output", type=str, default="out_performance.csv",
        help="File for CSV-format output"
    )
    parser_test_performance.add_argument(
        "--nwords", type=int,
        help="Number of words to test (if unspecified, will test all)"
    )
    parser_test_performance.add_argument(
        "--nproc", type=int, default=DEFAULT_NPROC,
        help="Number of parallel processes"
    )
    parser_test_performance.add_argument(
        "--no_ray", action="store_true",
        help="Use a process pool rather than Ray"
    )

    args = parser.parse_args()

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    loglevel = logging.DEBUG if args.verbose else logging.INFO
    main_only_quicksetup_rootlogger(level=loglevel)

    # -------------------------------------------------------------------------
    # Act
    # -------------------------------------------------------------------------
    if args.command == cmd_make:
        make_wordlist(args.source_dict, args.output)
        return

    params = ScoringParameters(
        overall_weight=args.overall_weight,
        positional_weight=args.positional_weight,
        repeat_penalty=args.repeat_penalty,
        scan_limit=args.scan_limit,
        penalty_threshold=args.penalty_threshold,
        opening_book=args.opening_book,
        fallback_guess=args.fallback_guess,
    )
    rootlog.debug(f"Scoring: {params}")
    scorer = GuessScorer(params)
    bank = WordBank.load(acceptable_filename=args.acceptable_filename,
                         secrets_filename=args.secrets_filename)

    if args.command == cmd_play:
        game = RaceGame(bank, scorer=scorer,
                        rng=random.Random(args.seed),
                        bot_delay_s=args.bot_delay,
                        show_threshold=args.show_threshold)
        play_interactive(game, colour=not args.no_colour)
    elif args.command == cmd_autosolve:
        autosolve_verbose(bank, args.secret, scorer,
                          show_threshold=args.show_threshold,
                          advice_top_n=args.advice_top_n)
    elif args.command == cmd_test_performance:
        # Imported here: starting Ray is slow, and only needed for this.
        from wordle_race.benchmark import measure_performance
        measure_performance(
            bank,
            output_filename=args.output,
            nwords=args.nwords,
            nproc=args.nproc,
            params=params,
            loglevel=loglevel,
            use_ray=not args.no_ray,
        )
    else:
        raise AssertionError("argument-parsing bug")


if __name__ == '__main__':
    main()
