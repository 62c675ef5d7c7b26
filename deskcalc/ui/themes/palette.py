"""QColor adapters for hosts that paint widgets directly."""

from __future__ import annotations

from PySide6.QtGui import QColor

from deskcalc.ui.themes.colors import ColorSpec
from deskcalc.ui.themes.models import ThemeRecord


def to_qcolor(color: ColorSpec) -> QColor:
    """Convert a ColorSpec to QColor; colors without alpha are opaque."""
    alpha = 255 if color.alpha is None else color.alpha
    return QColor(color.red, color.green, color.blue, alpha)


def build_palette(theme: ThemeRecord) -> dict[str, QColor]:
    """Map each color role of ``theme`` to a QColor."""
    return {role: to_qcolor(color) for role, color in theme.colors().items()}
