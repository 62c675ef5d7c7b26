"""Runtime path helpers for source and frozen executable modes."""

from __future__ import annotations

import os
from pathlib import Path
import sys

THEME_CONFIG_FILENAME = "application.yaml"


def is_frozen() -> bool:
    """Return True when running from a PyInstaller bundle."""
    return bool(getattr(sys, "frozen", False))


def bundle_root() -> Path:
    """Return the runtime extraction root for frozen mode, else package parent."""
    if is_frozen():
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass)
    return Path(__file__).resolve().parent.parent


def package_root() -> Path:
    """Return the root path that contains the `deskcalc` package resources."""
    if is_frozen():
        root = bundle_root()
        candidate = root / "deskcalc"
        if candidate.exists():
            return candidate
        return root
    return Path(__file__).resolve().parent


def resource_path(*parts: str) -> Path:
    """Resolve a bundled resource path across source/frozen runtime layouts."""
    return package_root().joinpath("resources", *parts)


def theme_config_path() -> Path:
    """Resolve the built-in theme configuration file."""
    return resource_path(THEME_CONFIG_FILENAME)


def app_data_dir() -> Path:
    """Per-user data directory; not created here."""
    base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
    return base / "deskcalc"
