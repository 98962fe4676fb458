"""Locale registry: message dictionaries, case flags and matchers per locale.

Locales are declared in ``LOCALES`` and their messages live in ``<locale>.json``
next to this module. Declaration order matters: :func:`match_locale` returns the
first locale whose matcher accepts a candidate.

A ``null`` value in a JSON file means the message text is the key itself
(numbers, proper nouns and, for the primary locale, every key).
"""

import json
import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

PRIMARY_LOCALE = "zh-CN"

# name -> (upper_case, matcher pattern)
LOCALES: dict[str, tuple[bool, str]] = {
    "zh-CN": (False, r"^zh(?:[-_]|$)"),
    "en-US": (True, r"^en(?:[-_]|$)"),
}
SUPPORTED_LOCALES = list(LOCALES)

# Display names are message keys whose text is the key itself.
LANGUAGE_NAMES = {"zh-CN": "简体中文", "en-US": "English"}

_dir = Path(__file__).parent


class LocaleDataError(ValueError):
    """Raised when a locale data file is missing or malformed."""


class _IdAsMessage:
    def __repr__(self) -> str:
        return "ID_AS_MESSAGE"


ID_AS_MESSAGE = _IdAsMessage()

CompiledTemplate = Callable[[Mapping], str]


@dataclass
class LocaleEntry:
    name: str
    data: Mapping[str, str | _IdAsMessage]
    upper_case: bool
    pattern: re.Pattern
    template: dict[str, CompiledTemplate] = field(default_factory=dict)

    def match(self, candidate: str) -> bool:
        return self.pattern.search(candidate) is not None


class LocaleRegistry:
    """Ordered, read-only collection of :class:`LocaleEntry` objects."""

    def __init__(self, entries: list[LocaleEntry]):
        self._entries = {entry.name: entry for entry in entries}

    def __getitem__(self, name: str) -> LocaleEntry:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[LocaleEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def get_translations(self, locale: str) -> dict[str, str]:
        """Return the resolved messages of a locale, raw templates included.

        Falls back to the primary locale for unsupported locales.
        """
        entry = self._entries.get(locale) or self._entries[PRIMARY_LOCALE]
        return {
            key: key if message is ID_AS_MESSAGE else message
            for key, message in entry.data.items()
        }


def _load_messages(path: Path) -> dict[str, str | _IdAsMessage]:
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise LocaleDataError(f"Cannot load locale data from {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise LocaleDataError(f"{path.name} must contain a JSON object")

    messages: dict[str, str | _IdAsMessage] = {}
    for key, value in raw.items():
        if value is None:
            messages[key] = ID_AS_MESSAGE
        elif isinstance(value, str):
            messages[key] = value
        else:
            raise LocaleDataError(f"{path.name}: value of {key!r} must be a string or null")
    return messages


def load_registry(directory: Path = _dir) -> LocaleRegistry:
    """Build a fresh registry from the JSON files in ``directory``."""
    entries = []
    for name, (upper_case, pattern) in LOCALES.items():
        entries.append(
            LocaleEntry(
                name=name,
                data=MappingProxyType(_load_messages(directory / f"{name}.json")),
                upper_case=upper_case,
                pattern=re.compile(pattern, re.IGNORECASE),
            )
        )
    return LocaleRegistry(entries)


_registry: LocaleRegistry | None = None


def get_registry() -> LocaleRegistry:
    """Return the application-wide registry, loading it on first use."""
    global _registry
    if _registry is None:
        _registry = load_registry()
    return _registry


def get_translations(locale: str) -> dict[str, str]:
    return get_registry().get_translations(locale)
