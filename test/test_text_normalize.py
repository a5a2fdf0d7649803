"""Tests for text normalization used by string matchers."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AnnotationFilter.core.text import fold, normalize_text


class TestNormalizeText(unittest.TestCase):
    def test_lowercases(self) -> None:
        self.assertEqual(normalize_text("Climate CHANGE"), "climate change")

    def test_strips_diacritics(self) -> None:
        self.assertEqual(normalize_text("Café Crème"), "cafe creme")
        self.assertEqual(normalize_text("Lefèvre"), "lefevre")

    def test_precomposed_and_decomposed_forms_agree(self) -> None:
        precomposed = "\u00e9"
        decomposed = "e\u0301"
        self.assertEqual(normalize_text(precomposed), normalize_text(decomposed))

    def test_compatibility_characters_are_expanded(self) -> None:
        self.assertEqual(normalize_text("\ufb01le"), "file")

    def test_casefold_handles_sharp_s(self) -> None:
        self.assertEqual(normalize_text("Straße"), "strasse")

    def test_empty_string(self) -> None:
        self.assertEqual(normalize_text(""), "")

    def test_fold_keeps_base_characters(self) -> None:
        self.assertEqual(fold("áb̈c"), "abc")


if __name__ == "__main__":
    unittest.main()
