"""Tests for StoreOptions."""

from __future__ import annotations

import pydantic
import pytest

from dotconfig.formats import Format
from dotconfig.options import StoreOptions


class TestStoreOptions:
    def test_defaults(self) -> None:
        opts = StoreOptions()
        assert opts.format is None
        assert opts.indent is None
        assert opts.encoding == "utf-8"

    def test_format_enum(self) -> None:
        assert StoreOptions(format=Format.YAML).format is Format.YAML

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("yml", Format.YAML), ("yaml", Format.YAML), ("json", Format.JSON), ("ini", Format.JSON)],
    )
    def test_format_name_coerced(self, name: str, expected: Format) -> None:
        assert StoreOptions(format=name).format is expected

    def test_indent_must_be_positive(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            StoreOptions(indent=0)

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="Unknown encoding"):
            StoreOptions(encoding="no-such-codec")

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            StoreOptions(watch=True)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        opts = StoreOptions()
        with pytest.raises(pydantic.ValidationError):
            opts.indent = 4  # type: ignore[misc]
