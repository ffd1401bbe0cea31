#!/usr/bin/env python
"""Check the repository's lang/ files against the English fallback."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
LANG_DIR = ROOT / "lang"

# run from a checkout without installing
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lang_check import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main([str(LANG_DIR), *sys.argv[1:]]))
