"""
Measuring how well the solver does across many secret words.
"""

import csv
import logging
from concurrent.futures import ProcessPoolExecutor
from contextlib import contextmanager
from statistics import mean, median
from timeit import default_timer as timer
from typing import Generator, List, Sequence, Tuple

from cardinal_pythonlib.lists import chunks
from cardinal_pythonlib.logs import configure_logger_for_colour
from cardinal_pythonlib.maths_py import round_sf
import numpy as np
import ray

from wordle_race.constants import DEFAULT_NPROC, DEFAULT_SIG_FIGURES
from wordle_race.scorer import GuessScorer, ScoringParameters
from wordle_race.solver import SolverLoop
from wordle_race.words import WordBank

log = logging.getLogger(__name__)

RESULT_TYPE = Tuple[str, int, bool]


# =============================================================================
# Timing
# =============================================================================

@contextmanager
def time_section(name: str,
                 loglevel: int = logging.DEBUG) -> Generator[None, None, None]:
    start = timer()
    try:
        yield
    finally:
        end = timer()
        log.log(loglevel, f"{name} took {end - start} s")


# =============================================================================
# Solving many words
# =============================================================================

def solve_many(targets: Sequence[str],
               all_words: np.ndarray,
               params: ScoringParameters = None) -> List[RESULT_TYPE]:
    """
    Solves for each target in turn, reusing one solver.

    Returns a list of tuples: secret, n_guesses, won.
    """
    solver = SolverLoop(all_words, scorer=GuessScorer(params))
    results = []  # type: List[RESULT_TYPE]
    for target in targets:
        snapshot = solver.play(target)
        log.debug(f"{target}: {snapshot}")
        results.append((str(target), snapshot.turn, snapshot.won))
    return results


def solve_many_single_arg(
        args: Tuple[Sequence[str], np.ndarray, ScoringParameters]) \
        -> List[RESULT_TYPE]:
    """
    Version of :func:`solve_many` that takes a single argument, which is
    necessary for the process pool's map function.
    """
    targets, all_words, params = args
    return solve_many(targets, all_words, params)


@ray.remote
def solve_many_ray(targets: Sequence[str],
                   all_words: np.ndarray,
                   params: ScoringParameters = None,
                   loglevel: int = logging.INFO) -> List[RESULT_TYPE]:
    """
    Ray version, for a batch of targets.
    """
    raylog = logging.getLogger(__name__)
    configure_logger_for_colour(raylog, level=loglevel)
    with time_section(f"Batch of {len(targets)}"):
        return solve_many(targets, all_words, params)


# =============================================================================
# Performance testing
# =============================================================================

def summarize(results: Sequence[RESULT_TYPE],
              sig_fig: int = DEFAULT_SIG_FIGURES) -> str:
    """
    One-line summary of performance.
    """
    assert len(results) > 0, "No words!"
    guess_counts = [n for _, n, _ in results]
    n_won = sum(1 for _, _, won in results if won)
    return (
        f"{len(results)} words: "
        f"min {min(guess_counts)}, "
        f"median {median(guess_counts)}, "
        f"mean {round_sf(mean(guess_counts), sig_fig)}, "
        f"max {max(guess_counts)} guesses; "
        f"won {n_won} ({round_sf(100 * n_won / len(results), sig_fig)}%)"
    )


def measure_performance(
        bank: WordBank,
        output_filename: str,
        nwords: int = None,
        nproc: int = DEFAULT_NPROC,
        params: ScoringParameters = None,
        chunks_per_worker: int = 5,
        loglevel: int = logging.INFO,
        use_ray: bool = True) -> List[RESULT_TYPE]:
    """
    Play every possible secret (or the first ``nwords``), write results to a
    CSV file, and report performance statistics.
    """
    all_words = bank.solver_words
    test_words = bank.secrets.tolist()
    if nwords is not None:
        test_words = test_words[:nwords]
    n_words = len(test_words)
    if n_words == 0:
        raise ValueError("No words to test")
    nproc = max(1, nproc)
    words_per_chunk = max(1, n_words // (nproc * chunks_per_worker))
    batches = list(chunks(test_words, words_per_chunk))
    all_results = []  # type: List[RESULT_TYPE]
    with open(output_filename, "wt", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["secret", "n_guesses", "won"])

        def record(results: Sequence[RESULT_TYPE]) -> None:
            for secret, n_guesses, won in results:
                writer.writerow([secret, n_guesses, int(won)])
                all_results.append((secret, n_guesses, won))
            f.flush()  # nice to be able to follow the output live

        with time_section(f"Testing {n_words} words", loglevel=logging.INFO):
            if nproc == 1:
                record(solve_many(test_words, all_words, params))

            elif use_ray:
                log.info("Starting Ray")
                ray.init(num_cpus=nproc, ignore_reinit_error=True)
                pending_jobs = [
                    solve_many_ray.remote(targets, all_words, params,
                                          loglevel=loglevel)
                    for targets in batches
                ]
                log.info(f"Submitted {len(pending_jobs)} jobs, aiming for "
                         f"{words_per_chunk} words per job")
                while pending_jobs:
                    log.debug(f"Waiting for a job to complete "
                              f"({len(pending_jobs)} running)...")
                    done_jobs, pending_jobs = ray.wait(pending_jobs)
                    for done_job in done_jobs:
                        record(ray.get(done_job))

            else:
                arglist = ((targets, all_words, params) for targets in batches)
                with ProcessPoolExecutor(nproc) as executor:
                    for results in executor.map(solve_many_single_arg,
                                                arglist):
                        record(results)

    log.info(f"Results written to {output_filename}")
    log.info(summarize(all_results))
    return all_results
