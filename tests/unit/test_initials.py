import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from monogram_core.errors import ConfigError, InvalidInput
from monogram_renderer.initials import build_initials, collapse_whitespace, get_initials, to_ascii


class _Named:
    def __init__(self, value: str):
        self.value = value

    def __str__(self) -> str:
        return self.value


class InitialsTests(unittest.TestCase):
    def test_two_words(self):
        self.assertEqual(get_initials("John Doe", 2), "JD")

    def test_single_word_truncated(self):
        self.assertEqual(get_initials("Cher", 2), "CH")
        self.assertEqual(get_initials("cher", 3), "CHE")

    def test_single_word_shorter_than_length(self):
        self.assertEqual(get_initials("al", 3), "AL")
        self.assertEqual(get_initials("x", 2), "X")

    def test_multiple_words_keep_order_and_truncate(self):
        self.assertEqual(get_initials("jean luc picard", 2), "JL")
        self.assertEqual(get_initials("a b c d e", 3), "ABC")
        self.assertEqual(get_initials("a b", 5), "AB")

    def test_whitespace_collapsed(self):
        self.assertEqual(get_initials("  multiple   spaces  ", 2), "MS")
        self.assertEqual(get_initials("John\t\n Doe", 2), "JD")
        self.assertEqual(collapse_whitespace("  a   b  "), "a b")

    def test_empty_name(self):
        for n in range(1, 5):
            self.assertEqual(get_initials("", n), "")
        self.assertEqual(get_initials("    ", 2), "")
        self.assertEqual(get_initials(None, 2), "")

    def test_multibyte_characters_are_whole(self):
        self.assertEqual(get_initials("émile zola", 2), "ÉZ")
        self.assertEqual(get_initials("Łukasz", 1), "Ł")
        self.assertEqual(get_initials("李 明", 2), "李明")

    def test_ascii_folding(self):
        self.assertEqual(get_initials("Émile Zola", 2, fold_ascii=True), "EZ")
        self.assertEqual(get_initials("Łukasz Żak", 2, fold_ascii=True), "LZ")
        self.assertEqual(to_ascii("Straße Øresund"), "Strasse Oresund")

    def test_ascii_folding_transliterates_other_scripts(self):
        self.assertEqual(get_initials("Иван Петров", 2, fold_ascii=True), "IP")
        self.assertEqual(get_initials("Νίκος", 2, fold_ascii=True), "NI")
        self.assertEqual(get_initials("Νίκος Παπαδόπουλος", 2, fold_ascii=True), "NP")
        self.assertEqual(get_initials("李 Wei", 2, fold_ascii=True), "LW")

    def test_non_string_values(self):
        self.assertEqual(get_initials(42, 2), "42")
        self.assertEqual(get_initials(_Named("ada lovelace"), 2), "AL")

    def test_rejects_values_without_text(self):
        for value in (["john", "doe"], {"name": "john"}, b"john", ("a", "b"), object()):
            with self.assertRaises(InvalidInput):
                get_initials(value, 2)

    def test_invalid_length(self):
        with self.assertRaises(ConfigError):
            get_initials("John Doe", 0)

    def test_build_initials_uppercases(self):
        self.assertEqual(build_initials("ada lovelace", 2), "AL")
        self.assertEqual(build_initials("", 2), "")


if __name__ == "__main__":
    unittest.main()
