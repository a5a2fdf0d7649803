"""Shared helpers for reading typed values out of config sections.

Every error names the full key path of the offending value (``log.level``,
``queries[0].fields.tag.operator``) so a broken config file can be fixed
without reading the loader.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class ConfigSection:
    """One mapping of the config tree together with its key path."""

    path: str
    values: Mapping[str, Any]

    @classmethod
    def of(cls, raw: Mapping[str, Any], key: str, *, required: bool) -> ConfigSection:
        """Look up a top-level section.

        Raises:
            ValueError: If the section is required but missing.
            TypeError: If the section is not a mapping.
        """
        section = raw.get(key)
        if section is None:
            if required:
                raise ValueError(f"Missing required config: {key}")
            section = {}
        if not isinstance(section, Mapping):
            raise TypeError(f"{key} must be an object")
        return cls(path=key, values=section)

    def key(self, field: str) -> str:
        return f"{self.path}.{field}"

    def get(self, field: str, default: Any = _MISSING) -> Any:
        """Return a raw value; without a default the field is required."""
        if field in self.values:
            return self.values[field]
        if default is _MISSING:
            raise ValueError(f"Missing required config: {self.key(field)}")
        return default

    def get_str(self, field: str, default: Any = _MISSING) -> str:
        return expect_str(self.get(field, default), self.key(field))

    def get_bool(self, field: str, default: Any = _MISSING) -> bool:
        return expect_bool(self.get(field, default), self.key(field))

    def get_str_list(self, field: str, default: Any = _MISSING) -> list[str]:
        return expect_str_list(self.get(field, default), self.key(field))

    def get_choice(self, field: str, choices: Iterable[str], default: Any = _MISSING) -> str:
        return expect_choice(self.get(field, default), choices, self.key(field))


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    # YAML "yes"/"no" already load as booleans; strings are rejected.
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_number(value: Any, config_key: str) -> float:
    """Validate and return a number; numeric strings are accepted."""
    if isinstance(value, bool):
        raise TypeError(f"{config_key} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            raise TypeError(f"{config_key} must be a number") from None
    raise TypeError(f"{config_key} must be a number")


def expect_str_list(value: Any, config_key: str) -> list[str]:
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    bad = [idx for idx, item in enumerate(value) if not isinstance(item, str)]
    if bad:
        raise TypeError(f"{config_key}[{bad[0]}] must be a string")
    return list(value)


def expect_choice(value: Any, choices: Iterable[str], config_key: str) -> str:
    """Match a string against ``choices`` ignoring case and surrounding blanks.

    Returns:
        The matching choice as spelled in ``choices``.

    Raises:
        TypeError: If the value is not a string.
        ValueError: If the value is not one of the choices.
    """
    canonical = {choice.lower(): choice for choice in choices}
    text = expect_str(value, config_key).strip().lower()
    if text not in canonical:
        raise ValueError(f"{config_key} must be one of {sorted(canonical.values())}")
    return canonical[text]
