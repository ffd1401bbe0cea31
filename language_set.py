from __future__ import annotations

"""
A searchable set of languages with a current and a fallback language.

Lookups try the current language first and the fallback language second;
the first hit wins.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from i18n import DecodeError, Language

log = logging.getLogger(__name__)


class LanguageSet:
    def __init__(self, fallback: str, languages: Iterable[Language] = ()) -> None:
        self._current = fallback
        self._fallback = fallback
        self._languages: dict[str, Language] = {}
        for lang in languages:
            self.add_language(lang)

    @property
    def current(self) -> str:
        return self._current

    @property
    def fallback(self) -> str:
        return self._fallback

    # ---------------------------
    # Membership
    # ---------------------------
    def add_language(self, language: Language) -> None:
        """Insert a copy of language, replacing any language with the same code."""
        if language.short_name in self._languages:
            log.debug("Replacing language '%s'", language.short_name)
        self._languages[language.short_name] = language.copy()

    def load_language(
        self, source: str | os.PathLike[str], resources: Mapping[str, bytes] | None = None
    ) -> None:
        self.add_language(Language.decode_from_source(source, resources))

    def load_directory(self, lang_dir: str | Path, pattern: str = "*.json") -> list[str]:
        """Load every matching file in lang_dir; returns the codes loaded."""
        loaded: list[str] = []
        for p in sorted(Path(lang_dir).glob(pattern)):
            try:
                lang = Language.decode_from_source(p)
            except DecodeError as e:
                log.warning("Failed to load locale %s: %s", p.name, e)
                raise
            self.add_language(lang)
            loaded.append(lang.short_name)
        return loaded

    def language(self, code: str) -> Language | None:
        return self._languages.get(code)

    def codes(self) -> list[str]:
        return sorted(self._languages)

    def __contains__(self, code: object) -> bool:
        return code in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    # ---------------------------
    # Selection
    # ---------------------------
    def set_current_language(self, code: str) -> bool:
        if code not in self._languages:
            return False
        self._current = code
        return True

    def set_fallback_language(self, code: str) -> bool:
        if code not in self._languages:
            return False
        self._fallback = code
        return True

    def current_language(self) -> Language | None:
        return self._languages.get(self._current)

    def fallback_language(self) -> Language | None:
        return self._languages.get(self._fallback)

    # ---------------------------
    # Lookup
    # ---------------------------
    def get_from(self, code: str, key: str) -> str | None:
        lang = self._languages.get(code)
        if lang is None:
            return None
        return lang.get(key)

    def get(self, key: str) -> str | None:
        for lang in (self.current_language(), self.fallback_language()):
            if lang is not None:
                s = lang.get(key)
                if s is not None:
                    return s
        return None

    def utf8_resource(self, name: str) -> str | None:
        for lang in (self.current_language(), self.fallback_language()):
            if lang is not None:
                s = lang.utf8_resource(name)
                if s is not None:
                    return s
        return None

    def binary_resource(self, name: str) -> bytes | None:
        for lang in (self.current_language(), self.fallback_language()):
            if lang is not None:
                b = lang.binary_resource(name)
                if b is not None:
                    return b
        return None

    def __getitem__(self, key: str) -> str:
        return get_string(self, key)

    # ---------------------------
    # Audits
    # ---------------------------
    def verify(self) -> dict[str, list[str]]:
        """Per language, the flat keys that the fallback language does not have."""
        fallback = self.fallback_language()
        if fallback is None:
            return {}
        reference = set(fallback.strings())
        return {
            code: sorted(set(lang.strings()) - reference)
            for code, lang in self._languages.items()
        }

    def missing(self) -> dict[str, list[str]]:
        """Per language, the fallback keys it has no translation for."""
        fallback = self.fallback_language()
        if fallback is None:
            return {}
        reference = set(fallback.strings())
        return {
            code: sorted(reference - set(lang.strings()))
            for code, lang in self._languages.items()
        }

    def __repr__(self) -> str:
        return f"LanguageSet(current={self._current!r}, fallback={self._fallback!r}, languages={self.codes()!r})"


def get_string(registry: LanguageSet, key: str) -> str:
    """registry.get(key), with a miss turned into an empty string."""
    s = registry.get(key)
    return s if s is not None else ""
