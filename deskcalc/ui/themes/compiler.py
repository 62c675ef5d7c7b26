"""Theme compilation helpers."""

from __future__ import annotations

from deskcalc.ui.themes.models import ThemeRecord

# Object names the host assigns to its widgets.
WINDOW_OBJECT = "CalculatorWindow"
DISPLAY_OBJECT = "Display"
NUMBER_BUTTON_OBJECT = "NumberButton"
OPERATOR_BUTTON_OBJECT = "OperatorButton"
EQUAL_BUTTON_OBJECT = "EqualButton"


def compile_theme_stylesheet(theme: ThemeRecord) -> str:
    """Compile a theme record into a Qt stylesheet for the calculator window."""
    background = theme.application_background.to_css()
    text = theme.text_color.to_css()
    return f"""
#{WINDOW_OBJECT} {{
    background-color: {background};
    color: {text};
}}

#{DISPLAY_OBJECT} {{
    background-color: {background};
    color: {text};
    border: none;
}}

QPushButton#{NUMBER_BUTTON_OBJECT} {{
    background-color: {theme.numbers_background.to_css()};
    color: {text};
    border: none;
}}

QPushButton#{OPERATOR_BUTTON_OBJECT} {{
    background-color: {theme.operator_background.to_css()};
    color: {text};
    border: none;
}}

QPushButton#{EQUAL_BUTTON_OBJECT} {{
    background-color: {theme.btn_equal_background.to_css()};
    color: {theme.btn_equal_text_color.to_css()};
    border: none;
}}
""".strip() + "\n"
