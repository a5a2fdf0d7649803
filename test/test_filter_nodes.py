"""Tests for term and boolean filter nodes."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AnnotationFilter.core.models import Annotation
from AnnotationFilter.filters.matchers import FIELD_MATCHERS
from AnnotationFilter.filters.nodes import BooleanOpFilter, TermFilter


class _ConstFilter:
    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls = 0

    def matches(self, annotation: Annotation) -> bool:
        del annotation
        self.calls += 1
        return self.result


class TestTermFilter(unittest.TestCase):
    def test_term_is_normalized_at_construction(self) -> None:
        term_filter = TermFilter("Événement", FIELD_MATCHERS["text"])
        self.assertEqual(term_filter.term, "evenement")

    def test_matches_normalized_substring(self) -> None:
        term_filter = TermFilter("RÉSUMÉ", FIELD_MATCHERS["text"])
        self.assertTrue(term_filter.matches(Annotation(id="a", text="A short resume of the paper")))

    def test_any_value_is_enough(self) -> None:
        term_filter = TermFilter("econ", FIELD_MATCHERS["tag"])
        self.assertTrue(term_filter.matches(Annotation(id="a", tags=("policy", "Economics"))))

    def test_no_value_contains_term(self) -> None:
        term_filter = TermFilter("science", FIELD_MATCHERS["tag"])
        self.assertFalse(term_filter.matches(Annotation(id="a", tags=("policy", "economics"))))

    def test_no_values_never_match(self) -> None:
        term_filter = TermFilter("", FIELD_MATCHERS["tag"])
        self.assertFalse(term_filter.matches(Annotation(id="a")))


class TestBooleanOpFilter(unittest.TestCase):
    def test_and_requires_all(self) -> None:
        ann = Annotation(id="a")
        self.assertTrue(BooleanOpFilter("and", [_ConstFilter(True), _ConstFilter(True)]).matches(ann))
        self.assertFalse(BooleanOpFilter("and", [_ConstFilter(True), _ConstFilter(False)]).matches(ann))

    def test_or_requires_any(self) -> None:
        ann = Annotation(id="a")
        self.assertTrue(BooleanOpFilter("or", [_ConstFilter(False), _ConstFilter(True)]).matches(ann))
        self.assertFalse(BooleanOpFilter("or", [_ConstFilter(False), _ConstFilter(False)]).matches(ann))

    def test_empty_children(self) -> None:
        ann = Annotation(id="a")
        self.assertTrue(BooleanOpFilter("and", []).matches(ann))
        self.assertFalse(BooleanOpFilter("or", []).matches(ann))

    def test_and_short_circuits_on_first_failure(self) -> None:
        skipped = _ConstFilter(True)
        BooleanOpFilter("and", [_ConstFilter(False), skipped]).matches(Annotation(id="a"))
        self.assertEqual(skipped.calls, 0)

    def test_or_short_circuits_on_first_success(self) -> None:
        skipped = _ConstFilter(False)
        BooleanOpFilter("or", [_ConstFilter(True), skipped]).matches(Annotation(id="a"))
        self.assertEqual(skipped.calls, 0)

    def test_nested_combinators(self) -> None:
        tree = BooleanOpFilter(
            "and",
            [
                BooleanOpFilter("or", [_ConstFilter(False), _ConstFilter(True)]),
                BooleanOpFilter("and", [_ConstFilter(True)]),
            ],
        )
        self.assertTrue(tree.matches(Annotation(id="a")))

    def test_unsupported_operator(self) -> None:
        with self.assertRaisesRegex(ValueError, "operator"):
            BooleanOpFilter("not", [])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
