"""Tests for config override behavior with defaults."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AnnotationFilter.config import load_config, load_config_with_defaults


_BASE_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

input:
  path: data/annotations.json

output:
  base_dir: output
  formats: [console]

queries:
  - name: base
    fields:
      text: base
"""

_OVERRIDE_YAML = """
log:
  level: DEBUG

filter:
  unknown_fields: error

queries:
  - name: override
    fields:
      tag:
        terms: [a, b]
        operator: or
"""


class TestConfigOverride(unittest.TestCase):
    def test_override_merges_sections_and_replaces_lists(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            default_path = temp_path / "default.yml"
            override_path = temp_path / "override.yml"
            default_path.write_text(_BASE_YAML, encoding="utf-8")
            override_path.write_text(_OVERRIDE_YAML, encoding="utf-8")

            cfg = load_config_with_defaults(override_path, default_path=default_path)

        self.assertEqual(cfg.log.level, "DEBUG")
        self.assertEqual(cfg.log.dir, "log")
        self.assertEqual(cfg.input.path, "data/annotations.json")
        self.assertEqual(cfg.filter.unknown_fields, "error")
        self.assertEqual([q.name for q in cfg.filter.queries], ["override"])

    def test_default_path_only(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            default_path = Path(temp_dir) / "default.yml"
            default_path.write_text(_BASE_YAML, encoding="utf-8")
            cfg = load_config(default_path)

        self.assertEqual(cfg.filter.queries[0].fields["text"].terms, ("base",))

    def test_non_mapping_root_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            default_path = Path(temp_dir) / "default.yml"
            default_path.write_text("- just\n- a list\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "Config root"):
                load_config(default_path)

    def test_repository_default_config_loads(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual([q.name for q in cfg.filter.queries], ["climate-notes", "last-week-by-alice"])
        self.assertEqual(cfg.filter.queries[1].fields["since"].terms, (604800.0,))


if __name__ == "__main__":
    unittest.main()
