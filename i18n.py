from __future__ import annotations

import copy
import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import string_tree
from string_tree import StringTree

log = logging.getLogger(__name__)


class DecodeError(Exception):
    """A language document could not be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SourceReadError(DecodeError):
    """The location holding a language document could not be read."""


class Language:
    """One translation bundle: a nested string table plus named resources.

    Strings are looked up with flat keys, e.g. 'category\\category2\\foo'.
    Resources are raw bytes supplied at load time and never part of the
    JSON document. Attachments are free-form values kept on the instance
    and dropped when the language is serialized.
    """

    def __init__(
        self,
        name: str,
        short_name: str,
        strings: dict[str, StringTree],
        resources: Mapping[str, bytes] | None = None,
    ) -> None:
        self._name = name
        self._short_name = short_name
        self._strings = copy.deepcopy(strings)
        self._resources: dict[str, bytes] = dict(resources or {})
        self._attachments: dict[str, Any] = {}

    # ---------------------------
    # Decoding
    # ---------------------------
    @classmethod
    def from_dict(cls, obj: Any, resources: Mapping[str, bytes] | None = None) -> Language:
        if not isinstance(obj, dict):
            raise DecodeError(f"expected a JSON object, got {type(obj).__name__}")
        for field in ("name", "short_name"):
            if not isinstance(obj.get(field), str):
                raise DecodeError(f"missing or invalid field '{field}'")
        if "strings" not in obj:
            raise DecodeError("missing field 'strings'")
        try:
            strings = string_tree.parse_tree(obj["strings"])
            return cls(obj["name"], obj["short_name"], strings, resources)
        except ValueError as e:
            raise DecodeError(str(e)) from e
        except RecursionError as e:
            raise DecodeError(f"strings: nested too deeply ({e})") from e

    @classmethod
    def decode_from_text(cls, text: str, resources: Mapping[str, bytes] | None = None) -> Language:
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(str(e)) from e
        except RecursionError as e:
            raise DecodeError(f"document nested too deeply ({e})") from e
        return cls.from_dict(obj, resources)

    @classmethod
    def decode_from_source(
        cls, path: str | os.PathLike[str], resources: Mapping[str, bytes] | None = None
    ) -> Language:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"{path}: {e}") from e
        lang = cls.decode_from_text(text, resources)
        log.debug("Loaded language '%s' from %s", lang.short_name, path)
        return lang

    # ---------------------------
    # Accessors
    # ---------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def short_name(self) -> str:
        return self._short_name

    def strings(self) -> dict[str, str]:
        """Flattened view of the whole table."""
        return string_tree.flatten_all(self._strings)

    def get(self, key: str) -> str | None:
        return string_tree.get(self._strings, key)

    def shapes(self) -> dict[str, str]:
        """Every flat key, leaves and categories, mapped to 'leaf' or 'branch'."""
        return string_tree.walk_shapes(self._strings)

    def resource_names(self) -> list[str]:
        return sorted(self._resources)

    def binary_resource(self, name: str) -> bytes | None:
        return self._resources.get(name)

    def utf8_resource(self, name: str) -> str | None:
        data = self._resources.get(name)
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return None

    # ---------------------------
    # Attachments
    # ---------------------------
    def attach(self, name: str, value: Any) -> bool:
        """Store a JSON-encodable value under name. Returns False if it can't be encoded."""
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError) as e:
            log.warning("Attachment '%s' on '%s' not stored: %s", name, self._short_name, e)
            return False
        self._attachments[name] = encoded
        return True

    def attachment(self, name: str, kind: type | None = None) -> Any:
        encoded = self._attachments.get(name)
        if encoded is None:
            return None
        value = json.loads(encoded)
        if kind is None:
            return value
        # JSON booleans are not numbers
        if isinstance(value, bool) and kind is not bool:
            return None
        if kind is float and isinstance(value, int):
            return float(value)
        return value if isinstance(value, kind) else None

    # ---------------------------
    # Serialization
    # ---------------------------
    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "short_name": self._short_name,
            "strings": copy.deepcopy(self._strings),
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def copy(self) -> Language:
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Language):
            return NotImplemented
        return (
            self._name == other._name
            and self._short_name == other._short_name
            and self._strings == other._strings
            and self._resources == other._resources
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Language({self._short_name!r}, {self._name!r})"


def available_locales(lang_dir: str | Path) -> dict[str, Path]:
    locales: dict[str, Path] = {}
    lang_dir = Path(lang_dir)
    if not lang_dir.exists():
        return locales
    for p in sorted(lang_dir.glob("*.json")):
        locales[p.stem] = p
    return locales
