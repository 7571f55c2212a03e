"""Tests for configuration models and loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from rpsprites.core.compositing import Geometry
from rpsprites.core.config import AppConfig, detect_format, load_app_config, load_config


class TestAppConfigDefaults:
    """Defaults reproduce the no-argument behaviour."""

    def test_defaults(self):
        config = AppConfig()

        assert config.elements == ["air", "earth", "fire", "paper", "rock", "scissors", "water"]
        assert config.augments == ["armored", "combo", "parry"]
        assert config.paths.sources_dir == Path("assets/sources")
        assert config.paths.output_dir == Path("assets")
        assert config.compositor.binary == "magick"
        assert config.compositor.timeout_seconds is None
        assert config.generation.keep_going is False
        assert config.generation.check_sources is False
        assert config.generation.prune_stale is False
        assert config.logging.level == "INFO"

    def test_default_layout(self):
        layout = AppConfig().layout.to_layout()

        assert layout.canvas.size == "128x128"
        assert layout.canvas.depth == 8
        assert layout.augment_badge == Geometry(48, 48, 8, 72)
        assert layout.aspect_badge == Geometry(48, 48, 72, 72)


class TestAppConfigValidation:
    """Invalid identities and layouts are rejected."""

    def test_hyphenated_identity_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(elements=["fire-ball"])

    def test_duplicate_identity_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(augments=["parry", "parry"])

    def test_overlapping_sets_rejected(self):
        with pytest.raises(ValidationError, match="both element and augment"):
            AppConfig(elements=["fire", "parry"], augments=["parry"])

    def test_malformed_geometry_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"layout": {"aspect_badge": "48by48"}})

    def test_bad_log_level_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"logging": {"level": "LOUD"}})

    def test_unknown_keys_ignored(self):
        config = AppConfig.model_validate({"future_option": True})
        assert config.elements


class TestLoading:
    """Test JSON/YAML loading."""

    def test_detect_format(self):
        assert detect_format("a.json") == "json"
        assert detect_format("a.YAML") == "yaml"
        assert detect_format("a.yml") == "yaml"
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("a.toml")

    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "rpsprites.yaml"
        path.write_text(
            "elements: [fire, water]\naugments: [parry]\ngeneration:\n  keep_going: true\n",
            encoding="utf-8",
        )

        config = load_app_config(path)

        assert config.elements == ["fire", "water"]
        assert config.augments == ["parry"]
        assert config.generation.keep_going is True

    def test_load_json(self, tmp_path: Path):
        path = tmp_path / "rpsprites.json"
        path.write_text(json.dumps({"compositor": {"binary": "convert"}}), encoding="utf-8")

        assert load_app_config(path).compositor.binary == "convert"

    def test_empty_yaml_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}
        assert load_app_config(path) == AppConfig()

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_app_config(tmp_path / "missing.yaml")

    def test_missing_default_file_gives_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert load_app_config() == AppConfig()

    def test_default_file_picked_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "rpsprites.yaml").write_text("augments: [combo]\n", encoding="utf-8")
        assert load_app_config().augments == ["combo"]

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("elements: [fire\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_yaml_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- fire\n- water\n", encoding="utf-8")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_config(path)
