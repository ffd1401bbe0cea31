"""
Translation strings from JSON language files, with a current and a fallback language.

    from embedded_lang import LanguageSet, embedded_language, get_string

    translator = LanguageSet("fr", [
        embedded_language("en.json", base_dir="lang"),
        embedded_language("fr.json", base_dir="lang"),
    ])
    translator.set_fallback_language("en")
    assert get_string(translator, "tree") == "arbre"
"""

from embedded import embedded_language
from i18n import DecodeError, Language, SourceReadError, available_locales
from language_set import LanguageSet, get_string
from string_tree import SEPARATOR

__version__ = "0.5.0"

__all__ = [
    "SEPARATOR",
    "DecodeError",
    "Language",
    "LanguageSet",
    "SourceReadError",
    "available_locales",
    "embedded_language",
    "get_string",
]
