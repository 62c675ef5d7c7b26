"""Theme configuration exports."""

from deskcalc.ui.themes.colors import ColorSpec
from deskcalc.ui.themes.loader import LoadResult, load_catalog, load_themes, read_theme_catalog
from deskcalc.ui.themes.models import ThemeCatalog, ThemeRecord, ThemeRecordBuilder
from deskcalc.ui.themes.registry import ThemeRegistry

__all__ = [
    "ColorSpec",
    "LoadResult",
    "ThemeCatalog",
    "ThemeRecord",
    "ThemeRecordBuilder",
    "ThemeRegistry",
    "load_catalog",
    "load_themes",
    "read_theme_catalog",
]
