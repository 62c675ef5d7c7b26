"""Theme configuration parsing and fail-soft loading."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Mapping

import yaml

from deskcalc.errors import ConfigLoadFailure, ErrorCode, classify_exception
from deskcalc.runtime_paths import theme_config_path
from deskcalc.ui.themes.constants import (
    COLOR_ROLE_KEYS,
    MAX_CONFIG_BYTES,
    NAME_KEY,
    THEMES_KEY,
)
from deskcalc.ui.themes.models import ThemeCatalog, ThemeRecord

logger = logging.getLogger("deskcalc.themes")

_ENTRY_KEYS = frozenset({NAME_KEY, *COLOR_ROLE_KEYS.values()})


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of reading a theme file: a catalog or the reason there is none."""

    path: Path
    catalog: ThemeCatalog | None = None
    failure: ConfigLoadFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def load_themes(path: Path | None = None) -> Mapping[str, ThemeRecord]:
    """Return themes keyed by name. Never raises; empty on any problem."""
    return load_catalog(path).as_mapping()


def load_catalog(path: Path | None = None) -> ThemeCatalog:
    """Load a ThemeCatalog, logging a warning and returning an empty one on failure."""
    result = read_theme_catalog(path)
    if result.failure is not None:
        logger.warning(
            "theme configuration ignored (%s): %s",
            result.failure.code.name,
            result.failure,
        )
        return ThemeCatalog.empty()
    assert result.catalog is not None
    if result.catalog.duplicate_names:
        logger.debug(
            "duplicate theme names dropped from %s: %s",
            result.path,
            ", ".join(result.catalog.duplicate_names),
        )
    logger.info("loaded %d theme(s) from %s", len(result.catalog), result.path)
    return result.catalog


def read_theme_catalog(path: Path | None = None) -> LoadResult:
    """Read and validate a theme file, reporting failures in the result."""
    config_path = Path(path) if path is not None else theme_config_path()
    try:
        _check_readable(config_path)
        document = yaml.safe_load(_read_text_limited(config_path, max_bytes=MAX_CONFIG_BYTES))
        catalog = parse_theme_document(document)
    except Exception as exc:
        return LoadResult(path=config_path, failure=classify_exception(exc, config_path))
    return LoadResult(path=config_path, catalog=catalog)


def parse_theme_document(data: object) -> ThemeCatalog:
    """Decode an already-parsed YAML document into a ThemeCatalog.

    Any invalid entry fails the whole document.
    """
    if data is None:
        raise ConfigLoadFailure(ErrorCode.CONFIG_EMPTY)

    if isinstance(data, Mapping):
        _reject_unknown_keys(data, allowed={THEMES_KEY}, context="top level")
        entries = data.get(THEMES_KEY)
    else:
        entries = data

    if entries is None:
        raise ConfigLoadFailure(ErrorCode.CONFIG_EMPTY)
    if not isinstance(entries, list):
        raise ConfigLoadFailure(
            ErrorCode.CONFIG_INVALID,
            message=f"Expected a list of themes, got {type(entries).__name__}",
        )

    records: list[ThemeRecord | None] = []
    for index, entry in enumerate(entries):
        if entry is None:
            records.append(None)
            continue
        records.append(_parse_entry(entry, index))

    catalog = ThemeCatalog.build(records)
    if not len(catalog):
        raise ConfigLoadFailure(ErrorCode.CONFIG_EMPTY)
    return catalog


def _parse_entry(entry: object, index: int) -> ThemeRecord:
    context = f"theme entry {index}"
    if not isinstance(entry, Mapping):
        raise ConfigLoadFailure(
            ErrorCode.CONFIG_INVALID,
            message=f"{context}: expected a mapping, got {type(entry).__name__}",
        )
    _reject_unknown_keys(entry, allowed=_ENTRY_KEYS, context=context)

    colors = {role: entry.get(key) for role, key in COLOR_ROLE_KEYS.items()}
    return ThemeRecord(name=entry.get(NAME_KEY), **colors)


def _reject_unknown_keys(
    data: Mapping[object, object],
    *,
    allowed: set[str] | frozenset[str],
    context: str,
) -> None:
    unknown = sorted(str(key) for key in data.keys() if key not in allowed)
    if unknown:
        joined = ", ".join(unknown)
        raise ConfigLoadFailure(
            ErrorCode.CONFIG_INVALID,
            message=f"{context}: unsupported keys found: {joined}",
        )


def _check_readable(path: Path) -> None:
    if not path.exists():
        raise ConfigLoadFailure(ErrorCode.CONFIG_MISSING, path)
    if not path.is_file():
        raise ConfigLoadFailure(
            ErrorCode.CONFIG_UNREADABLE,
            path,
            message="Theme configuration path is not a regular file.",
        )
    if not os.access(path, os.R_OK):
        raise ConfigLoadFailure(ErrorCode.CONFIG_UNREADABLE, path)


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    size = path.stat().st_size
    if size > max_bytes:
        raise ConfigLoadFailure(
            ErrorCode.CONFIG_INVALID,
            path,
            message=f"Theme configuration exceeds max size ({max_bytes} bytes).",
        )
    return path.read_text(encoding="utf-8")
