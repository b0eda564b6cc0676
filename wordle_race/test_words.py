"""
Tests for word lists.
"""

import os
import random
import tempfile
import unittest

from wordle_race.constants import FALLBACK_WORDS
from wordle_race.words import (
    WordBank,
    make_word,
    make_wordlist,
    read_words,
)


class TestWords(unittest.TestCase):
    def test_make_word(self) -> None:
        self.assertEqual(make_word(" crane\n"), "CRANE")
        for bad in ("CRANES", "CR4NE", "", "CRAN"):
            with self.assertRaises(ValueError):
                make_word(bad)


class TestReading(unittest.TestCase):
    def setUp(self) -> None:
        self.tempdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tempdir.cleanup)

    def _write(self, name: str, text: str) -> str:
        filename = os.path.join(self.tempdir.name, name)
        with open(filename, "wt") as f:
            f.write(text)
        return filename

    def test_read_words(self) -> None:
        filename = self._write("w.txt",
                               "slate\n\nCRANE\nbad-word\ncrane\nABOUT\n")
        words = read_words(filename)
        self.assertEqual(words.tolist(), ["ABOUT", "CRANE", "SLATE"])

    def test_read_words_max_n(self) -> None:
        filename = self._write("w.txt", "SLATE\nCRANE\nABOUT\n")
        self.assertEqual(read_words(filename, max_n=2).tolist(),
                         ["CRANE", "SLATE"])

    def test_make_wordlist(self) -> None:
        source = self._write("dict", "apple\nbanana\nApple\ncrane\nit's\n")
        dest = os.path.join(self.tempdir.name, "out.txt")
        make_wordlist(source, dest)
        with open(dest) as f:
            self.assertEqual(f.read(), "APPLE\nCRANE\n")

    def test_load_missing(self) -> None:
        missing = os.path.join(self.tempdir.name, "nope.txt")
        bank = WordBank.load(acceptable_filename=missing,
                             secrets_filename=missing)
        self.assertEqual(bank.secrets.tolist(), sorted(FALLBACK_WORDS))

    def test_load_empty(self) -> None:
        empty = self._write("empty.txt", "\n")
        bank = WordBank.load(acceptable_filename=empty,
                             secrets_filename=empty)
        self.assertEqual(bank.secrets.tolist(), sorted(FALLBACK_WORDS))

    def test_load_undecodable(self) -> None:
        garbled = os.path.join(self.tempdir.name, "garbled.txt")
        with open(garbled, "wb") as f:
            f.write(b"CRANE\n\xff\xfe\xfa\xff\n")
        bank = WordBank.load(acceptable_filename=garbled,
                             secrets_filename=garbled)
        self.assertEqual(bank.secrets.tolist(), sorted(FALLBACK_WORDS))

    def test_load_files(self) -> None:
        secrets = self._write("s.txt", "CRANE\nSLATE\n")
        acceptable = self._write("a.txt", "SALET\n")
        bank = WordBank.load(acceptable_filename=acceptable,
                             secrets_filename=secrets)
        self.assertEqual(bank.secrets.tolist(), ["CRANE", "SLATE"])
        self.assertEqual(bank.solver_words.tolist(),
                         ["CRANE", "SALET", "SLATE"])


class TestWordBank(unittest.TestCase):
    def test_bundled(self) -> None:
        bank = WordBank.load()
        self.assertEqual(bank.secrets.size, 2309)
        assert bank.acceptable.size > 3000
        assert "SALET" in bank.solver_words.tolist()
        assert "SALET" not in bank.secrets.tolist()
        for word in ("ADIEU", "TEARS", "JAZZY", "KNOLL", "ABBEY", "REAST"):
            assert bank.is_acceptable(word), f"{word} not acceptable"
        assert set(bank.secrets.tolist()).issubset(
            set(bank.acceptable.tolist()))

    def test_acceptable(self) -> None:
        bank = WordBank(acceptable=["SALET"], secrets=["crane"])
        assert bank.is_acceptable("salet")
        assert bank.is_acceptable("CRANE")
        assert not bank.is_acceptable("QUEEN")
        self.assertEqual(str(bank), "1 possible secrets, 2 acceptable guesses")

    def test_random_secret(self) -> None:
        bank = WordBank.fallback()
        rng = random.Random(42)
        for _ in range(10):
            assert bank.random_secret(rng) in FALLBACK_WORDS
        self.assertEqual(WordBank.fallback().random_secret(random.Random(1)),
                         bank.random_secret(random.Random(1)))

    def test_no_secrets(self) -> None:
        with self.assertRaises(ValueError):
            WordBank(acceptable=["SALET"], secrets=[])
