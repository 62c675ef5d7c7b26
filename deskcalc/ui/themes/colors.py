"""Hex color literals used by theme files."""

from __future__ import annotations

from dataclasses import dataclass
import re

from deskcalc.errors import MalformedColor

_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")
_MARKER = "#"
_RGB_DIGITS = 6
_ARGB_DIGITS = 8


def _check_channel(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise MalformedColor(value, f"{name} channel must be an integer in [0, 255]")


@dataclass(frozen=True, slots=True)
class ColorSpec:
    """An RGB color with an optional alpha byte.

    ``alpha`` is ``None`` for colors written in the six digit form, which keeps
    ``RRGGBB`` and ``FFRRGGBB`` distinct when written back out.
    """

    red: int
    green: int
    blue: int
    alpha: int | None = None

    def __post_init__(self) -> None:
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)
        if self.alpha is not None:
            _check_channel("alpha", self.alpha)

    @classmethod
    def parse(cls, text: str) -> ColorSpec:
        """Parse ``RRGGBB`` or ``AARRGGBB``, optionally prefixed with ``#``.

        Surrounding whitespace is ignored and digits are case-insensitive.
        Three digit shorthand and ``0x`` prefixes are rejected.
        """
        if text is None:
            raise MalformedColor(text, "value is missing")
        if not isinstance(text, str):
            raise MalformedColor(text, f"expected a string, got {type(text).__name__}")

        digits = text.strip()
        if not digits:
            raise MalformedColor(text, "value is empty")
        if digits.startswith(_MARKER):
            digits = digits[len(_MARKER):]
        if len(digits) not in (_RGB_DIGITS, _ARGB_DIGITS):
            raise MalformedColor(
                text, f"expected {_RGB_DIGITS} or {_ARGB_DIGITS} hex digits, got {len(digits)}"
            )

        groups = [digits[i:i + 2] for i in range(0, len(digits), 2)]
        channels: list[int] = []
        for group in groups:
            if not _HEX_DIGITS_RE.fullmatch(group):
                raise MalformedColor(text, f"{group!r} is not hexadecimal")
            channels.append(int(group, 16))

        if len(channels) == 4:
            alpha, red, green, blue = channels
            return cls(red, green, blue, alpha)
        red, green, blue = channels
        return cls(red, green, blue)

    @property
    def has_alpha(self) -> bool:
        return self.alpha is not None

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_canonical_string(self) -> str:
        """Uppercase hex digits without a marker: ``RRGGBB`` or ``AARRGGBB``."""
        rgb = f"{self.red:02X}{self.green:02X}{self.blue:02X}"
        if self.alpha is None:
            return rgb
        return f"{self.alpha:02X}{rgb}"

    def to_hex(self, prefix: str = _MARKER) -> str:
        return f"{prefix}{self.to_canonical_string()}"

    def to_css(self) -> str:
        """Stylesheet form: ``#RRGGBB``, or ``rgba(...)`` when alpha is set."""
        if self.alpha is None:
            return self.to_hex()
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha})"

    def __str__(self) -> str:
        return self.to_canonical_string()
