"""
Alias configuration for identity parsing.

Deployments can teach the parsers extra spellings (another locale, a house
romanization) without touching the built-in tables. Extra aliases live in a
YAML file:

    colors:
      rouge: 赤
    professions:
      pion: 兵
      tour: rook

Targets may be written with any spelling the built-in tables already accept.

Environment Variables:
    CETKAIK_ALIAS_FILE: Path of the alias file read by get_notation_config()
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .aliases import COLOR_LOOKUP, PROFESSION_LOOKUP, normalize_spelling
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ALIAS_FILE_ENV = "CETKAIK_ALIAS_FILE"

__all__ = [
    "ALIAS_FILE_ENV",
    "NotationConfig",
    "get_notation_config",
    "load_notation_config",
    "reset_notation_config",
]


@dataclass(frozen=True)
class NotationConfig:
    """Extra spellings merged into the built-in alias tables.

    Both mappings go from a lower-cased spelling to a canonical glyph.
    """
    extra_color_aliases: Mapping[str, str] = field(default_factory=dict)
    extra_profession_aliases: Mapping[str, str] = field(default_factory=dict)


def _resolve_section(
    section: Any,
    section_name: str,
    builtin: Dict[str, str],
    path: Path,
) -> Dict[str, str]:
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'{section_name}' must be a mapping of alias to target",
            path=path,
        )

    resolved: Dict[str, str] = {}
    for alias, target in section.items():
        if not isinstance(alias, str) or not isinstance(target, str) or not alias:
            raise ConfigurationError(
                f"'{section_name}' entries must be non-empty strings",
                path=path,
                context={"alias": alias},
            )
        glyph = builtin.get(normalize_spelling(target))
        if glyph is None:
            raise ConfigurationError(
                f"Unknown target {target!r} for alias {alias!r}",
                path=path,
                context={"section": section_name},
            )
        key = normalize_spelling(alias)
        existing = builtin.get(key)
        if existing is not None and existing != glyph:
            raise ConfigurationError(
                f"Alias {alias!r} already means {existing!r}, not {glyph!r}",
                path=path,
                context={"section": section_name},
            )
        resolved[key] = glyph
    return resolved


def load_notation_config(path: Path | str) -> NotationConfig:
    """Read an alias file into a NotationConfig."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Missing alias file: {path}", path=path)

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Alias file is not valid YAML: {exc}", path=path
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError("Alias file must contain a mapping", path=path)

    config = NotationConfig(
        extra_color_aliases=_resolve_section(
            data.get("colors"), "colors", COLOR_LOOKUP, path
        ),
        extra_profession_aliases=_resolve_section(
            data.get("professions"), "professions", PROFESSION_LOOKUP, path
        ),
    )
    logger.info(
        "Loaded alias file %s (%d color, %d profession aliases)",
        path,
        len(config.extra_color_aliases),
        len(config.extra_profession_aliases),
    )
    return config


_config_lock = threading.Lock()
_config: Optional[NotationConfig] = None


def get_notation_config() -> NotationConfig:
    """Return the process-wide config, loading it on first use.

    The parsers call this on every miss in the built-in tables, so a bad
    alias file must not surface here: it is logged once and the built-in
    tables are used alone until reset_notation_config(). Call
    load_notation_config() directly to have the file validated loudly.
    """
    global _config
    with _config_lock:
        if _config is None:
            alias_file = os.getenv(ALIAS_FILE_ENV)
            if not alias_file:
                _config = NotationConfig()
            else:
                try:
                    _config = load_notation_config(alias_file)
                except ConfigurationError as exc:
                    logger.error("Ignoring alias file %s: %s", alias_file, exc)
                    _config = NotationConfig()
        return _config


def reset_notation_config() -> None:
    """Drop the cached config so the next lookup re-reads the environment."""
    global _config
    with _config_lock:
        _config = None
