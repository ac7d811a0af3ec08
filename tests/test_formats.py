"""Tests for format detection and codecs."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

import pytest
import yaml

from dotconfig.formats import Codec, Format, detect_format, get_codec


class TestFormatFromExtension:
    @pytest.mark.parametrize(
        ("extension", "expected"),
        [
            ("json", Format.JSON),
            (".json", Format.JSON),
            ("JSON", Format.JSON),
            ("yml", Format.YAML),
            ("yaml", Format.YAML),
            (".YAML", Format.YAML),
        ],
    )
    def test_known_extensions(self, extension: str, expected: Format) -> None:
        assert Format.from_extension(extension) is expected

    @pytest.mark.parametrize("extension", ["toml", "conf", ""])
    def test_unknown_extension_falls_back_to_json(
        self, extension: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="dotconfig.formats"):
            assert Format.from_extension(extension) is Format.JSON
        assert "Unrecognized config extension" in caplog.text

    def test_format_is_str(self) -> None:
        assert Format.YAML == "yaml"


class TestDetectFormat:
    def test_from_path(self) -> None:
        assert detect_format(Path("etc/app/settings.yml")) is Format.YAML
        assert detect_format("settings.json") is Format.JSON

    def test_no_suffix(self) -> None:
        assert detect_format("settings") is Format.JSON


class TestJsonCodec:
    def test_parse(self) -> None:
        codec = get_codec(Format.JSON)
        assert codec.parse('{"a": {"b": [1, 2]}}') == {"a": {"b": [1, 2]}}

    def test_parse_error_type(self) -> None:
        codec = get_codec(Format.JSON)
        with pytest.raises(codec.errors):
            codec.parse("{not json")

    def test_dump_compact_by_default(self) -> None:
        text = get_codec(Format.JSON).dump({"a": {"b": 1}}, None)
        assert "\n" not in text
        assert json.loads(text) == {"a": {"b": 1}}

    def test_dump_indent(self) -> None:
        text = get_codec(Format.JSON).dump({"a": 1}, 4)
        assert text == '{\n    "a": 1\n}'

    def test_dump_keeps_non_ascii(self) -> None:
        assert "é" in get_codec(Format.JSON).dump({"name": "café"}, None)


class TestYamlCodec:
    def test_parse(self) -> None:
        codec = get_codec(Format.YAML)
        assert codec.parse("a:\n  b: true\n") == {"a": {"b": True}}

    def test_parse_error_type(self) -> None:
        codec = get_codec(Format.YAML)
        with pytest.raises(codec.errors):
            codec.parse("{{invalid: yaml: ---")

    def test_parse_empty_document(self) -> None:
        assert get_codec(Format.YAML).parse("") is None

    def test_dump_preserves_key_order(self) -> None:
        text = get_codec(Format.YAML).dump({"b": 1, "a": 2}, None)
        assert text == "b: 1\na: 2\n"

    def test_dump_block_style(self) -> None:
        text = get_codec(Format.YAML).dump({"a": {"b": 1}}, None)
        assert text == "a:\n  b: 1\n"

    def test_dump_four_space_indent(self) -> None:
        text = get_codec(Format.YAML).dump({"a": {"b": 1}}, 4)
        assert text == "a:\n    b: 1\n"

    def test_dump_round_trips(self) -> None:
        data = {"config": {"foo": "bar", "bar": 5, "baz": True, "foobar": [1, 2, 3]}}
        assert yaml.safe_load(get_codec(Format.YAML).dump(data, None)) == data


class TestCodec:
    def test_codec_is_frozen(self) -> None:
        codec = get_codec(Format.JSON)
        with pytest.raises(dataclasses.FrozenInstanceError):
            codec.format = Format.YAML  # type: ignore[misc]

    @pytest.mark.parametrize("fmt", list(Format))
    def test_every_format_has_codec(self, fmt: Format) -> None:
        codec = get_codec(fmt)
        assert isinstance(codec, Codec)
        assert codec.format is fmt
