"""Unit tests for discovery file parsing and loading.

WHY: The core trusts its input completely. Anything the hub gets wrong —
an unknown category, a new capability code, a missing field — must be
caught here, at the boundary, with a clear error.

HOW: Tests cover:
  - Valid JSON dict → DiscoveryFile conversion
  - Closed-enumeration enforcement for categories and capability codes
  - Missing fields and wrong types
  - Reading from disk: happy path, missing file, invalid JSON

RULES:
- All file I/O tests use tmp_path fixtures for isolation.
"""

import json

import pytest

from alexa_connector.core.ir import CapabilityCode, DiscoveryFile, DisplayCategory
from alexa_connector.discovery import (
    DiscoveryFileError,
    load_discovery_file,
    parse_discovery_file,
)


class TestParseDiscoveryFile:
    """Dict → DiscoveryFile conversion."""

    def test_valid_file(self, sample_discovery_json, sample_discovery_file):
        assert parse_discovery_file(sample_discovery_json) == sample_discovery_file

    def test_enum_types(self, sample_discovery_json):
        result = parse_discovery_file(sample_discovery_json)
        device = result.devices[0]
        assert device.display_category is DisplayCategory.LIGHT
        assert device.capability_codes == (
            CapabilityCode.PowerController,
            CapabilityCode.BrightnessController,
        )

    def test_returns_frozen_tuples(self, sample_discovery_json):
        result = parse_discovery_file(sample_discovery_json)
        assert isinstance(result, DiscoveryFile)
        assert isinstance(result.devices, tuple)
        assert isinstance(result.devices[0].capability_codes, tuple)

    def test_duplicate_codes_kept(self, sample_discovery_json):
        sample_discovery_json["devices"][0]["capability_codes"] = ["PowerController", "PowerController"]
        result = parse_discovery_file(sample_discovery_json)
        assert result.devices[0].capability_codes == (
            CapabilityCode.PowerController,
            CapabilityCode.PowerController,
        )

    def test_no_devices(self):
        result = parse_discovery_file({"queue": "q", "devices": []})
        assert result == DiscoveryFile(queue="q", devices=())

    def test_extra_keys_ignored(self, sample_discovery_json):
        sample_discovery_json["generated_by"] = "hautomo"
        sample_discovery_json["devices"][0]["room"] = "office"
        result = parse_discovery_file(sample_discovery_json)
        assert len(result.devices) == 3


class TestValidationErrors:
    """Anything outside the discovery file shape is rejected."""

    def test_unknown_capability_code(self, sample_discovery_json):
        sample_discovery_json["devices"][1]["capability_codes"].append("LockController")
        with pytest.raises(DiscoveryFileError, match="capability_codes"):
            parse_discovery_file(sample_discovery_json)

    def test_unknown_display_category(self, sample_discovery_json):
        sample_discovery_json["devices"][0]["display_category"] = "TOASTER"
        with pytest.raises(DiscoveryFileError, match="display_category"):
            parse_discovery_file(sample_discovery_json)

    def test_missing_queue(self, sample_discovery_json):
        del sample_discovery_json["queue"]
        with pytest.raises(DiscoveryFileError, match="queue"):
            parse_discovery_file(sample_discovery_json)

    def test_missing_device_field(self, sample_discovery_json):
        del sample_discovery_json["devices"][2]["friendly_name"]
        with pytest.raises(DiscoveryFileError, match="friendly_name"):
            parse_discovery_file(sample_discovery_json)

    def test_not_an_object(self):
        with pytest.raises(DiscoveryFileError):
            parse_discovery_file(["not", "a", "file"])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_discovery_file({})

    def test_chains_pydantic_error(self):
        from pydantic import ValidationError

        with pytest.raises(DiscoveryFileError) as exc_info:
            parse_discovery_file({})
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestLoadDiscoveryFile:
    """Reading discovery files from disk."""

    def test_loads_from_path(self, tmp_path, sample_discovery_json, sample_discovery_file):
        path = tmp_path / "home.json"
        path.write_text(json.dumps(sample_discovery_json), encoding="utf-8")
        assert load_discovery_file(path) == sample_discovery_file

    def test_accepts_string_path(self, tmp_path, sample_discovery_json):
        path = tmp_path / "home.json"
        path.write_text(json.dumps(sample_discovery_json), encoding="utf-8")
        assert load_discovery_file(str(path)).queue == sample_discovery_json["queue"]

    def test_utf8_names(self, tmp_path):
        path = tmp_path / "home.json"
        data = {
            "queue": "q",
            "devices": [{
                "id": "k1",
                "friendly_name": "Köksfläkt",
                "description": "",
                "display_category": "SWITCH",
                "capability_codes": ["PowerController"],
            }],
        }
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        assert load_discovery_file(path).devices[0].friendly_name == "Köksfläkt"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DiscoveryFileError, match="Cannot read"):
            load_discovery_file(tmp_path / "nope.json")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"queue": "\xff\xfe", "devices": []}')
        with pytest.raises(DiscoveryFileError, match="Cannot read") as exc_info:
            load_discovery_file(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DiscoveryFileError, match="not valid JSON"):
            load_discovery_file(path)

    def test_logs_success(self, tmp_path, sample_discovery_json, caplog):
        path = tmp_path / "home.json"
        path.write_text(json.dumps(sample_discovery_json), encoding="utf-8")
        with caplog.at_level("INFO", logger="alexa_connector.discovery.loader"):
            load_discovery_file(path)
        assert "3 devices" in caplog.text
