"""Process-wide holder for the loaded theme catalog."""

from __future__ import annotations

from pathlib import Path

from deskcalc.runtime_paths import theme_config_path
from deskcalc.ui.themes.loader import load_catalog
from deskcalc.ui.themes.models import ThemeCatalog, ThemeRecord


class ThemeRegistry:
    """Loads themes from one configuration file and serves lookups.

    ``reload()`` swaps in a freshly built catalog; readers holding the old
    catalog keep a consistent view. Overlapping reloads are not supported.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = Path(config_path) if config_path is not None else theme_config_path()
        self._catalog = ThemeCatalog.empty()

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def catalog(self) -> ThemeCatalog:
        return self._catalog

    def reload(self) -> ThemeCatalog:
        self._catalog = load_catalog(self._config_path)
        return self._catalog

    def theme_names(self) -> list[str]:
        return self._catalog.names()

    def get_theme(self, name: str) -> ThemeRecord | None:
        return self._catalog.lookup(name)

    def default_theme(self) -> ThemeRecord | None:
        """The first theme in file order, if any."""
        for record in self._catalog:
            return record
        return None
