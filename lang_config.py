from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from language_set import LanguageSet

log = logging.getLogger(__name__)

ENV_LANG_DIR = "EMBEDDED_LANG_DIR"
ENV_FALLBACK = "EMBEDDED_LANG_FALLBACK"
ENV_CURRENT = "EMBEDDED_LANG_CURRENT"


@dataclass
class LangConfig:
    lang_dir: str = "lang"
    fallback: str = "en"
    current: str | None = None


def load_config(path: str | Path | None = None) -> LangConfig:
    """Read settings from a JSON file (if present), then apply env overrides."""
    cfg = LangConfig()
    p = Path(path) if path is not None else None
    if p is not None and p.exists():
        try:
            data = json.loads(p.read_text(encoding="utf-8", errors="ignore"))
            if not isinstance(data, dict):
                raise ValueError("top-level value is not an object")
            for field in ("lang_dir", "fallback", "current"):
                v = data.get(field)
                if isinstance(v, str) and v:
                    setattr(cfg, field, v)
        except (OSError, ValueError) as e:
            log.warning("Config load failed (%s): %s; using defaults", p, e)
            cfg = LangConfig()

    cfg.lang_dir = os.environ.get(ENV_LANG_DIR) or cfg.lang_dir
    cfg.fallback = os.environ.get(ENV_FALLBACK) or cfg.fallback
    cfg.current = os.environ.get(ENV_CURRENT) or cfg.current
    return cfg


def save_config(cfg: LangConfig, path: str | Path) -> None:
    Path(path).write_text(json.dumps(asdict(cfg), indent=2), encoding="utf-8")


def registry_from_config(cfg: LangConfig) -> LanguageSet:
    registry = LanguageSet(cfg.fallback)
    registry.load_directory(cfg.lang_dir)
    if cfg.current and not registry.set_current_language(cfg.current):
        # stay on the fallback
        log.warning("Configured language '%s' is not available", cfg.current)
    return registry
