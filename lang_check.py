#!/usr/bin/env python
"""
Fail if locale JSON files don't line up with the fallback locale.
- Report keys missing relative to the fallback, per locale
- Report keys a locale has that the fallback doesn't
- Flag structural mismatches (leaf in one locale, branch in another)
"""

from __future__ import annotations

import argparse
import logging
import sys

from i18n import DecodeError, Language, available_locales
from language_set import LanguageSet


def structural_mismatches(languages: list[Language]) -> dict[str, dict[str, str]]:
    """Flat keys whose kind differs between locales -> {code: kind}."""
    shapes = {lang.short_name: lang.shapes() for lang in languages}
    union_paths: set[str] = set().union(*[set(s) for s in shapes.values()])
    out: dict[str, dict[str, str]] = {}
    for path in sorted(union_paths):
        here = {code: s[path] for code, s in shapes.items() if path in s}
        if len(set(here.values())) > 1:
            out[path] = here
    return out


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check locale files against the fallback locale")
    parser.add_argument("lang_dir", nargs="?", default="lang", help="Directory of *.json locale files")
    parser.add_argument("--fallback", default="en", help="Fallback language code")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s - %(message)s")

    if not available_locales(args.lang_dir):
        print(f"No locale files found in {args.lang_dir}.", file=sys.stderr)
        return 1

    registry = LanguageSet(args.fallback)
    try:
        registry.load_directory(args.lang_dir)
    except DecodeError as e:
        print(f"[FAIL] {e}", file=sys.stderr)
        return 2

    if registry.fallback_language() is None:
        print(f"Fallback locale '{args.fallback}' not found in {args.lang_dir}.", file=sys.stderr)
        return 1

    ok = True

    for code, keys in sorted(registry.missing().items()):
        if keys:
            ok = False
            print(f"\n[FAIL] Missing in {code}:")
            for k in keys:
                print(f"  - {k}")

    for code, keys in sorted(registry.verify().items()):
        if keys:
            ok = False
            print(f"\n[FAIL] Not in {args.fallback}, present in {code}:")
            for k in keys:
                print(f"  - {k}")

    languages = [registry.language(code) for code in registry.codes()]
    for path, kinds in structural_mismatches([lang for lang in languages if lang is not None]).items():
        ok = False
        print(f"\n[FAIL] Structural mismatch at '{path}':")
        for code, kind in sorted(kinds.items()):
            print(f"  - {code}: {kind}")

    if ok:
        print("[OK] locale key sets match the fallback.")
        return 0
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
