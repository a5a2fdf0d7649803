"""Tests for the per-field matcher registry."""

import sys
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AnnotationFilter.core.metadata import quote
from AnnotationFilter.core.models import Annotation, AnnotationTarget, UserInfo
from AnnotationFilter.filters.matchers import ANY_FIELDS, FIELD_MATCHERS, timestamp_ms

_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def _quote_target(exact: str) -> AnnotationTarget:
    return AnnotationTarget(
        source="https://example.org",
        selector=(
            {"type": "TextPositionSelector", "start": 1, "end": 5},
            {"type": "TextQuoteSelector", "exact": exact},
        ),
    )


class TestQuoteAccessor(unittest.TestCase):
    def test_returns_exact_of_quote_selector(self) -> None:
        ann = Annotation(id="a", target=(_quote_target("the quoted words"),))
        self.assertEqual(quote(ann), "the quoted words")

    def test_no_target_returns_none(self) -> None:
        self.assertIsNone(quote(Annotation(id="a")))

    def test_target_without_quote_selector_returns_none(self) -> None:
        ann = Annotation(id="a", target=(AnnotationTarget(source="https://example.org"),))
        self.assertIsNone(quote(ann))

    def test_only_first_target_is_used(self) -> None:
        ann = Annotation(
            id="a",
            target=(AnnotationTarget(source="https://example.org"), _quote_target("second")),
        )
        self.assertIsNone(quote(ann))


class TestFieldValues(unittest.TestCase):
    def test_registry_fields(self) -> None:
        self.assertEqual(set(FIELD_MATCHERS), {"quote", "since", "tag", "text", "uri", "user"})
        self.assertEqual(ANY_FIELDS, ("quote", "text", "tag", "user"))

    def test_quote_defaults_to_empty_string(self) -> None:
        self.assertEqual(FIELD_MATCHERS["quote"].field_values(Annotation(id="a")), [""])

    def test_tag_returns_every_tag(self) -> None:
        ann = Annotation(id="a", tags=("one", "two"))
        self.assertEqual(FIELD_MATCHERS["tag"].field_values(ann), ["one", "two"])

    def test_tag_without_tags_has_no_values(self) -> None:
        self.assertEqual(FIELD_MATCHERS["tag"].field_values(Annotation(id="a")), [])

    def test_user_returns_account_and_display_name(self) -> None:
        ann = Annotation(id="a", user="acct:bob@example.org", user_info=UserInfo(display_name="Bob"))
        self.assertEqual(FIELD_MATCHERS["user"].field_values(ann), ["acct:bob@example.org", "Bob"])

    def test_user_missing_display_name_is_empty_string(self) -> None:
        ann = Annotation(id="a", user="acct:bob@example.org")
        self.assertEqual(FIELD_MATCHERS["user"].field_values(ann), ["acct:bob@example.org", ""])


class TestStringComparison(unittest.TestCase):
    def test_substring_containment(self) -> None:
        matcher = FIELD_MATCHERS["text"]
        self.assertTrue(matcher.matches("climate change", "mate ch"))
        self.assertFalse(matcher.matches("climate", "climate change"))

    def test_normalize_is_shared_by_text_fields(self) -> None:
        for field in ("quote", "tag", "text", "uri", "user"):
            with self.subTest(field=field):
                self.assertEqual(FIELD_MATCHERS[field].normalize("ÉTÉ"), "ete")


class TestTimestampConversion(unittest.TestCase):
    def test_iso_string_with_offset(self) -> None:
        self.assertEqual(timestamp_ms("2026-10-19T12:00:00+00:00"), _NOW.timestamp() * 1000)

    def test_naive_string_is_utc(self) -> None:
        self.assertEqual(timestamp_ms("2026-10-19T12:00:00"), _NOW.timestamp() * 1000)

    def test_naive_datetime_is_utc(self) -> None:
        self.assertEqual(timestamp_ms(datetime(2026, 10, 19, 12, 0, 0)), _NOW.timestamp() * 1000)

    def test_number_is_epoch_milliseconds(self) -> None:
        self.assertEqual(timestamp_ms(1_700_000_000_000), 1_700_000_000_000.0)

    def test_unreadable_values(self) -> None:
        for value in (None, "", "garbage", True, ["2026-10-19"]):
            with self.subTest(value=value):
                self.assertIsNone(timestamp_ms(value))


class TestSinceMatcher(unittest.TestCase):
    def _matches(self, updated: object, age: float) -> bool:
        matcher = FIELD_MATCHERS["since"]
        ann = Annotation(id="a", updated=updated)
        with patch("AnnotationFilter.filters.matchers.time.time", return_value=_NOW.timestamp()):
            return any(
                matcher.matches(matcher.normalize(value), matcher.normalize(age))
                for value in matcher.field_values(ann)
            )

    def test_recent_update_matches(self) -> None:
        self.assertTrue(self._matches((_NOW - timedelta(seconds=30)).isoformat(), 60))

    def test_old_update_does_not_match(self) -> None:
        self.assertFalse(self._matches((_NOW - timedelta(seconds=120)).isoformat(), 60))

    def test_boundary_is_inclusive(self) -> None:
        self.assertTrue(self._matches(_NOW - timedelta(seconds=60), 60))

    def test_unparseable_timestamp_never_matches(self) -> None:
        self.assertFalse(self._matches("garbage", 10**9))

    def test_numeric_string_term(self) -> None:
        self.assertTrue(self._matches((_NOW - timedelta(seconds=30)).isoformat(), "60"))
        self.assertFalse(self._matches((_NOW - timedelta(seconds=120)).isoformat(), " 60 "))

    def test_non_numeric_term_never_matches(self) -> None:
        for term in ("last week", "", None, True, ["60"]):
            with self.subTest(term=term):
                self.assertFalse(self._matches(_NOW - timedelta(seconds=1), term))  # type: ignore[arg-type]

    def test_normalize_converts_terms(self) -> None:
        normalize = FIELD_MATCHERS["since"].normalize
        self.assertEqual(normalize("3600"), 3600.0)
        self.assertEqual(normalize(5), 5.0)
        self.assertIsNone(normalize("soon"))

    def test_missing_timestamp_has_no_values(self) -> None:
        self.assertEqual(FIELD_MATCHERS["since"].field_values(Annotation(id="a")), [])


if __name__ == "__main__":
    unittest.main()
