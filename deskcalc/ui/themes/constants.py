"""Theme framework constants."""

from __future__ import annotations

MAX_THEME_NAME_LEN = 100
MAX_CONFIG_BYTES = 256 * 1024

THEMES_KEY = "themes"
NAME_KEY = "name"

# Record field -> key used in the YAML configuration file.
COLOR_ROLE_KEYS: dict[str, str] = {
    "application_background": "applicationBackground",
    "text_color": "textColor",
    "btn_equal_text_color": "btnEqualTextColor",
    "operator_background": "operatorBackground",
    "numbers_background": "numbersBackground",
    "btn_equal_background": "btnEqualBackground",
}

COLOR_ROLES: tuple[str, ...] = tuple(COLOR_ROLE_KEYS)
RECORD_FIELDS: tuple[str, ...] = (NAME_KEY, *COLOR_ROLES)
