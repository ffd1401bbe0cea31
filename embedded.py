from __future__ import annotations

"""
Languages bundled with the code that uses them.

embedded_language() reads a language document and its resource files once,
typically at import time, so that lookups afterwards never touch the disk:

    EN = embedded_language("en.json", {"license": "LICENSE.txt"}, package="myapp.lang")
"""

import logging
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path

from i18n import Language, SourceReadError

log = logging.getLogger(__name__)


def _read_bytes(filename: str, package: str | None, base_dir: str | Path | None) -> bytes:
    try:
        if package is not None:
            return importlib_resources.files(package).joinpath(filename).read_bytes()
        return (Path(base_dir or ".") / filename).read_bytes()
    except (OSError, ModuleNotFoundError) as e:
        where = package if package is not None else str(base_dir or ".")
        raise SourceReadError(f"{filename} ({where}): {e}") from e


def embedded_language(
    filename: str,
    resources: Mapping[str, str] | None = None,
    *,
    package: str | None = None,
    base_dir: str | Path | None = None,
) -> Language:
    """Build a Language from a bundled document plus named resource files.

    'resources' maps a resource name to the file holding its bytes. Files
    are resolved inside 'package' (via importlib.resources) when given,
    otherwise relative to 'base_dir' (default: current directory).
    """
    raw = _read_bytes(filename, package, base_dir)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceReadError(f"{filename}: {e}") from e

    blobs = {name: _read_bytes(path, package, base_dir) for name, path in (resources or {}).items()}
    lang = Language.decode_from_text(text, blobs)
    log.debug("Embedded language '%s' with %d resource(s)", lang.short_name, len(blobs))
    return lang
