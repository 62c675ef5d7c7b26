"""Tests for ThemeRecord, ThemeRecordBuilder and ThemeCatalog."""

from __future__ import annotations

import dataclasses

import pytest

from deskcalc.errors import ErrorCode, MalformedColor, ValidationError
from deskcalc.ui.themes.colors import ColorSpec
from deskcalc.ui.themes.constants import COLOR_ROLES
from deskcalc.ui.themes.models import ThemeCatalog, ThemeRecord, ThemeRecordBuilder


def _colors(**overrides: object) -> dict[str, object]:
    colors: dict[str, object] = {role: "112233" for role in COLOR_ROLES}
    colors.update(overrides)
    return colors


def _record(name: str = "Dark", **overrides: object) -> ThemeRecord:
    return ThemeRecord(name=name, **_colors(**overrides))


class TestThemeRecord:
    def test_colors_are_normalized(self):
        record = _record(text_color="#ffa07a")
        assert record.text_color == ColorSpec(255, 160, 122)
        assert record.to_config()["textColor"] == "FFA07A"

    def test_name_is_trimmed(self):
        assert _record(name="  Dark  ").name == "Dark"

    def test_accepts_color_spec_values(self):
        record = _record(numbers_background=ColorSpec(1, 2, 3))
        assert record.numbers_background == ColorSpec(1, 2, 3)

    @pytest.mark.parametrize("name", [None, "", "   ", 42, "x" * 101])
    def test_invalid_name_rejected(self, name):
        with pytest.raises(ValidationError) as excinfo:
            ThemeRecord(name, **_colors())
        assert excinfo.value.field == "name"
        assert excinfo.value.value == name

    def test_name_at_max_length_accepted(self):
        assert _record(name="x" * 100).name == "x" * 100

    def test_invalid_color_names_field_and_raw_value(self):
        with pytest.raises(ValidationError) as excinfo:
            _record(operator_background="GG0000")
        error = excinfo.value
        assert error.code is ErrorCode.FIELD_INVALID
        assert error.field == "operator_background"
        assert error.value == "GG0000"
        assert isinstance(error.__cause__, MalformedColor)

    def test_missing_color_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            _record(btn_equal_background=None)
        assert excinfo.value.field == "btn_equal_background"

    def test_value_semantics(self):
        first = _record(text_color="ffffff")
        second = _record(text_color="#FFFFFF")
        assert first == second
        assert hash(first) == hash(second)
        assert first != _record(text_color="FFFFFE")
        assert len({first, second}) == 1

    def test_record_is_immutable(self):
        record = _record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "Other"  # type: ignore[misc]

    def test_replace_validates_changes(self):
        record = _record()
        updated = record.replace(name="Light", text_color="000000")
        assert updated.name == "Light"
        assert updated.text_color == ColorSpec(0, 0, 0)
        assert record.name == "Dark"

        with pytest.raises(ValidationError):
            record.replace(text_color="nope")
        with pytest.raises(ValidationError) as excinfo:
            record.replace(font="Arial")
        assert excinfo.value.field == "font"

    def test_colors_mapping_in_role_order(self):
        assert list(_record().colors()) == list(COLOR_ROLES)


class TestThemeRecordBuilder:
    def _fill(self, builder: ThemeRecordBuilder) -> ThemeRecordBuilder:
        return (
            builder.set_name("Metallic")
            .set_application_background("B8BCC2")
            .set_text_color("1A1A1A")
            .set_btn_equal_text_color("FFFFFF")
            .set_operator_background("8E9399")
            .set_numbers_background("D4D7DB")
            .set_btn_equal_background("4A4F57")
        )

    def test_build_after_all_setters(self):
        builder = self._fill(ThemeRecordBuilder())
        assert builder.is_complete()
        record = builder.build()
        assert record.name == "Metallic"
        assert record.btn_equal_background == ColorSpec.parse("4A4F57")

    def test_incomplete_builder_refuses_to_build(self):
        builder = ThemeRecordBuilder().set_name("Partial").set_text_color("FFFFFF")
        assert not builder.is_complete()
        assert "application_background" in builder.missing_fields()
        with pytest.raises(ValidationError) as excinfo:
            builder.build()
        assert excinfo.value.field == "application_background"

    def test_setter_rejects_bad_value_without_recording_it(self):
        builder = ThemeRecordBuilder()
        with pytest.raises(ValidationError) as excinfo:
            builder.set_numbers_background("12345")
        assert excinfo.value.field == "numbers_background"
        assert excinfo.value.value == "12345"
        assert "numbers_background" in builder.missing_fields()

    def test_failed_setter_keeps_previous_value(self):
        builder = self._fill(ThemeRecordBuilder())
        with pytest.raises(ValidationError):
            builder.set_name("   ")
        assert builder.build().name == "Metallic"


class TestThemeCatalog:
    def test_first_seen_wins_on_duplicate_names(self):
        first = _record(name="Dark", text_color="FFFFFF")
        second = _record(name="Dark", text_color="000000")
        catalog = ThemeCatalog.build([first, second])
        assert catalog.lookup("Dark") is first
        assert len(catalog) == 1
        assert catalog.duplicate_names == ("Dark",)
        assert catalog.records == (first, second)

    def test_none_entries_skipped(self):
        record = _record(name="Light")
        catalog = ThemeCatalog.build([None, record, None])
        assert catalog.names() == ["Light"]
        assert catalog.records == (record,)

    def test_empty_input_gives_empty_catalog(self):
        catalog = ThemeCatalog.build([])
        assert len(catalog) == 0
        assert catalog.as_mapping() == {}
        assert len(ThemeCatalog.empty()) == 0

    def test_lookup_is_exact(self):
        catalog = ThemeCatalog.build([_record(name="Dark")])
        assert catalog.lookup("Dark") is not None
        assert catalog.lookup("dark") is None
        assert catalog.lookup("Dark ") is None
        assert "Dark" in catalog
        assert "Light" not in catalog

    def test_order_is_first_seen(self):
        names = ["Simple", "Dark", "Metallic", "Dark"]
        catalog = ThemeCatalog.build([_record(name=n) for n in names])
        assert catalog.names() == ["Simple", "Dark", "Metallic"]
        assert [record.name for record in catalog] == ["Simple", "Dark", "Metallic"]

    def test_mapping_is_read_only(self):
        catalog = ThemeCatalog.build([_record(name="Dark")])
        mapping = catalog.as_mapping()
        with pytest.raises(TypeError):
            mapping["Other"] = _record(name="Other")  # type: ignore[index]
        assert catalog.names() == ["Dark"]

    def test_accepts_generator(self):
        catalog = ThemeCatalog(_record(name=n) for n in ("A", "B"))
        assert catalog.names() == ["A", "B"]
