"""Headless startup for the calculator host: logging and the active theme."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from deskcalc.runtime_paths import app_data_dir, is_frozen, package_root
from deskcalc.ui.themes.compiler import compile_theme_stylesheet
from deskcalc.ui.themes.models import ThemeRecord
from deskcalc.ui.themes.registry import ThemeRegistry


@dataclass(frozen=True, slots=True)
class StartupState:
    """What the host needs to paint its first frame."""

    registry: ThemeRegistry
    theme: ThemeRecord | None
    stylesheet: str


def configure_startup_logger(log_dir: Path | None = None) -> logging.Logger:
    """Attach a rotating file handler to the ``deskcalc`` logger once."""
    root = logging.getLogger("deskcalc")
    if not root.handlers:
        root.setLevel(logging.INFO)
        directory = log_dir if log_dir is not None else app_data_dir() / "logs"
        directory.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            directory / "startup.log",
            maxBytes=512_000,
            backupCount=3,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        root.addHandler(handler)
    return logging.getLogger("deskcalc.startup")


def bootstrap(
    config_path: Path | None = None,
    theme_name: str | None = None,
    log_dir: Path | None = None,
) -> StartupState:
    """Load themes and pick the startup theme. Theme problems never raise."""
    logger = configure_startup_logger(log_dir)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    registry = ThemeRegistry(config_path)
    registry.reload()

    theme = registry.get_theme(theme_name) if theme_name else None
    if theme_name and theme is None:
        logger.warning("requested theme %r not found; using default", theme_name)
    if theme is None:
        theme = registry.default_theme()

    if theme is None:
        logger.warning("no themes available; host keeps its built-in look")
        return StartupState(registry=registry, theme=None, stylesheet="")

    logger.info("active theme: %s", theme.name)
    return StartupState(
        registry=registry,
        theme=theme,
        stylesheet=compile_theme_stylesheet(theme),
    )
