"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from deskcalc.errors import MalformedColor, ValidationError
from deskcalc.ui.themes.colors import ColorSpec
from deskcalc.ui.themes.constants import (
    COLOR_ROLE_KEYS,
    COLOR_ROLES,
    MAX_THEME_NAME_LEN,
    NAME_KEY,
    RECORD_FIELDS,
)


def validate_name(value: object) -> str:
    """Return the trimmed theme name or raise ValidationError."""
    if value is None:
        raise ValidationError(NAME_KEY, value, "must not be missing")
    if not isinstance(value, str):
        raise ValidationError(NAME_KEY, value, "must be a string")
    cleaned = value.strip()
    if not cleaned:
        raise ValidationError(NAME_KEY, value, "must not be empty or blank")
    if len(cleaned) > MAX_THEME_NAME_LEN:
        raise ValidationError(NAME_KEY, value, f"exceeds max length {MAX_THEME_NAME_LEN}")
    return cleaned


def validate_color(field_name: str, value: object) -> ColorSpec:
    """Return ``value`` as a ColorSpec or raise ValidationError naming the field."""
    if isinstance(value, ColorSpec):
        return value
    try:
        return ColorSpec.parse(value)  # type: ignore[arg-type]
    except MalformedColor as exc:
        raise ValidationError(field_name, value, exc.reason) from exc


@dataclass(frozen=True, slots=True)
class ThemeRecord:
    """A named calculator theme with six color roles.

    Color arguments may be ColorSpec instances or raw hex strings; every field
    is validated and normalized on construction, so an existing record is
    always complete. Equality and hashing cover all seven fields.
    """

    name: str
    application_background: ColorSpec
    text_color: ColorSpec
    btn_equal_text_color: ColorSpec
    operator_background: ColorSpec
    numbers_background: ColorSpec
    btn_equal_background: ColorSpec

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", validate_name(self.name))
        for role in COLOR_ROLES:
            object.__setattr__(self, role, validate_color(role, getattr(self, role)))

    def replace(self, **changes: object) -> ThemeRecord:
        """Return a copy with ``changes`` applied and re-validated."""
        unknown = sorted(set(changes) - set(RECORD_FIELDS))
        if unknown:
            raise ValidationError(unknown[0], changes[unknown[0]], "is not a theme field")
        return replace(self, **changes)

    def colors(self) -> dict[str, ColorSpec]:
        return {role: getattr(self, role) for role in COLOR_ROLES}

    def to_config(self) -> dict[str, str]:
        """Return the record as a configuration-file entry."""
        entry = {NAME_KEY: self.name}
        for role, key in COLOR_ROLE_KEYS.items():
            entry[key] = getattr(self, role).to_canonical_string()
        return entry


class ThemeRecordBuilder:
    """Assembles a ThemeRecord one field at a time.

    Each setter validates immediately. ``build()`` only succeeds once every
    field has been set successfully.
    """

    def __init__(self) -> None:
        self._values: dict[str, object] = {}

    def set_name(self, value: str) -> ThemeRecordBuilder:
        self._values[NAME_KEY] = validate_name(value)
        return self

    def set_application_background(self, value: str | ColorSpec) -> ThemeRecordBuilder:
        return self._set_color("application_background", value)

    def set_text_color(self, value: str | ColorSpec) -> ThemeRecordBuilder:
        return self._set_color("text_color", value)

    def set_btn_equal_text_color(self, value: str | ColorSpec) -> ThemeRecordBuilder:
        return self._set_color("btn_equal_text_color", value)

    def set_operator_background(self, value: str | ColorSpec) -> ThemeRecordBuilder:
        return self._set_color("operator_background", value)

    def set_numbers_background(self, value: str | ColorSpec) -> ThemeRecordBuilder:
        return self._set_color("numbers_background", value)

    def set_btn_equal_background(self, value: str | ColorSpec) -> ThemeRecordBuilder:
        return self._set_color("btn_equal_background", value)

    def missing_fields(self) -> list[str]:
        return [name for name in RECORD_FIELDS if name not in self._values]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def build(self) -> ThemeRecord:
        missing = self.missing_fields()
        if missing:
            raise ValidationError(missing[0], None, "has not been set")
        return ThemeRecord(**self._values)  # type: ignore[arg-type]

    def _set_color(self, role: str, value: str | ColorSpec) -> ThemeRecordBuilder:
        self._values[role] = validate_color(role, value)
        return self


class ThemeCatalog:
    """Ordered theme records indexed by name.

    The first record seen for a name wins; later records with the same name
    are dropped without raising and reported through ``duplicate_names``.
    ``None`` entries are skipped.
    """

    __slots__ = ("_records", "_by_name", "_duplicates")

    def __init__(self, records: Iterable[ThemeRecord | None] = ()) -> None:
        kept: list[ThemeRecord] = []
        by_name: dict[str, ThemeRecord] = {}
        duplicates: list[str] = []
        for record in records:
            if record is None:
                continue
            kept.append(record)
            if record.name in by_name:
                duplicates.append(record.name)
                continue
            by_name[record.name] = record
        self._records = tuple(kept)
        self._by_name = MappingProxyType(by_name)
        self._duplicates = tuple(duplicates)

    @classmethod
    def build(cls, records: Iterable[ThemeRecord | None]) -> ThemeCatalog:
        return cls(records)

    @classmethod
    def empty(cls) -> ThemeCatalog:
        return cls(())

    @property
    def records(self) -> tuple[ThemeRecord, ...]:
        return self._records

    @property
    def duplicate_names(self) -> tuple[str, ...]:
        return self._duplicates

    def lookup(self, name: str) -> ThemeRecord | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return list(self._by_name)

    def as_mapping(self) -> Mapping[str, ThemeRecord]:
        return self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[ThemeRecord]:
        return iter(self._by_name.values())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"ThemeCatalog(names={self.names()!r})"

