"""Tests for classification enums."""

from tsconv.domain.types import FieldKey, InputKind


class TestInputKind:
    def test_values(self) -> None:
        assert {k.value for k in InputKind} == {"timestamp", "date", "invalid"}

    def test_str_comparison(self) -> None:
        assert InputKind.DATE == "date"


class TestFieldKey:
    def test_values(self) -> None:
        assert [k.value for k in FieldKey] == [
            "formatted",
            "iso",
            "zoned",
            "utc",
            "millis",
            "seconds",
        ]
