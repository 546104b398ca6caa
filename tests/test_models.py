"""Tests for configuration models and persistence."""

import json

import pytest
from pydantic import ValidationError

from sldisplay.exceptions import ConfigFileInvalidError, ConfigValidationError
from sldisplay.models import AppConfig, Color, ResetConfig
from sldisplay.utils import PydanticPersistence


class TestColor:
    """Test Color model."""

    def test_gray(self):
        assert Color.gray().to_rgb_tuple() == (127, 127, 127)

    def test_off(self):
        assert Color.off().to_rgb_tuple() == (0, 0, 0)

    def test_to_hex(self):
        assert Color(r=127, g=0, b=16).to_hex() == "#7F0010"

    def test_out_of_range_rejected(self):
        """Test channels are limited to 7 bits."""
        with pytest.raises(ValidationError):
            Color(r=128, g=0, b=0)

    def test_frozen(self):
        """Test colors are immutable and hashable."""
        color = Color(r=1, g=2, b=3)

        with pytest.raises(ValidationError):
            color.r = 5
        assert hash(color) == hash(Color(r=1, g=2, b=3))


class TestAppConfig:
    """Test AppConfig defaults and persistence."""

    def test_defaults(self):
        config = AppConfig()

        assert config.device_id == "SL MkIII"
        assert config.output_format == "hex"
        assert config.reset == ResetConfig()
        assert config.reset.layout_index == 0x01
        assert config.reset.column_count == 8
        assert config.reset.fields_per_column == 3
        assert config.reset.color == Color.gray()

    def test_missing_file_gives_defaults(self, temp_dir):
        """Test a missing file falls back without writing it."""
        path = temp_dir / "config.json"

        config = AppConfig.load_or_default(path)

        assert config == AppConfig()
        assert not path.exists()

    def test_save_and_load(self, temp_dir):
        path = temp_dir / "nested" / "config.json"
        config = AppConfig(output_format="dec", reset=ResetConfig(column_count=4))

        config.save(path)
        loaded = AppConfig.load_or_default(path)

        assert loaded == config

    def test_save_creates_backup(self, temp_dir):
        """Test overwriting keeps a .bak copy of the previous file."""
        path = temp_dir / "config.json"
        AppConfig(device_id="first").save(path)
        AppConfig(device_id="second").save(path)

        backup = json.loads((temp_dir / "config.json.bak").read_text())
        assert backup["device_id"] == "first"
        assert AppConfig.load_or_default(path).device_id == "second"
        assert not (temp_dir / "config.json.tmp").exists()

    def test_invalid_json(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"device_id": "x",}')

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(path)

    def test_empty_file(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("  ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(path)

        assert "empty" in exc_info.value.user_message

    def test_invalid_value(self, temp_dir):
        """Test a bad value names the field and the file."""
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"reset": {"color": {"r": 200, "g": 0, "b": 0}}}))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.field == "reset.color.r"
        assert str(path) in exc_info.value.recovery_hint
        assert "0-127" in exc_info.value.recovery_hint

    def test_multiple_invalid_values(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"output_format": "bin", "reset": {"column_count": 9}}))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.field == "multiple fields"
        assert "2 validation errors" in exc_info.value.user_message


class TestPydanticPersistence:
    """Test persistence helpers directly."""

    def test_load_missing_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(temp_dir / "missing.json", AppConfig)

    def test_default_factory(self, temp_dir):
        config = PydanticPersistence.load_json_or_default(
            temp_dir / "missing.json", AppConfig, default_factory=lambda: AppConfig(device_id="x")
        )

        assert config.device_id == "x"
