"""Tests for config models and loaders."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError
import pytest
import yaml

from framekit.core.config.loader import (
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    validate_options,
)
from framekit.core.config.models import AppConfig, LoggingConfig, VideoConfig
from framekit.core.errors import InvalidConfiguration
from framekit.core.motion.spring import SpringConfig


@pytest.fixture(autouse=True)
def _clear_log_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture
def _restore_root_logger():
    """Restore root logger handlers after configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestModels:
    """Tests for config models."""

    def test_video_defaults(self) -> None:
        video = VideoConfig()
        assert (video.fps, video.width, video.height, video.duration_in_frames) == (30, 1920, 1080, 150)
        assert video.center == (960.0, 540.0)

    @pytest.mark.parametrize("field", ["fps", "width", "height", "duration_in_frames"])
    def test_video_rejects_non_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            VideoConfig(**{field: 0})

    def test_logging_level_pattern(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")

    def test_app_config_rejects_unknown_sections(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"render": {}})


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "fmt"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_known(self, name: str, fmt: str) -> None:
        assert detect_format(name) == fmt

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("a.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"video": {"fps": 60}}), encoding="utf-8")
        assert load_config(path) == {"video": {"fps": 60}}

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "app.yaml"
        path.write_text(yaml.safe_dump({"logging": {"level": "DEBUG"}}), encoding="utf-8")
        assert load_config(path) == {"logging": {"level": "DEBUG"}}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)


class TestValidateOptions:
    """Tests for validate_options."""

    def test_valid(self) -> None:
        cfg = validate_options(SpringConfig, {"damping": 12})
        assert cfg.damping == 12.0

    def test_none_means_defaults(self) -> None:
        assert validate_options(SpringConfig, None) == SpringConfig()

    def test_invalid_wrapped(self) -> None:
        with pytest.raises(InvalidConfiguration, match="Invalid SpringConfig") as exc_info:
            validate_options(SpringConfig, {"stiffness": -5})
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            validate_options(SpringConfig, {"springiness": 1})


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_defaults_without_path(self) -> None:
        assert load_app_config() == AppConfig()

    def test_missing_path_uses_defaults(self, tmp_path: Path) -> None:
        assert load_app_config(tmp_path / "absent.yaml") == AppConfig()

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "app.yaml"
        path.write_text("video:\n  fps: 24\n  width: 1280\n  height: 720\n", encoding="utf-8")
        config = load_app_config(path)
        assert config.video.fps == 24
        assert config.video.center == (640.0, 360.0)

    def test_invalid_content(self, tmp_path: Path) -> None:
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"video": {"fps": -1}}), encoding="utf-8")
        with pytest.raises(InvalidConfiguration):
            load_app_config(path)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
        assert load_app_config().logging.level == "DEBUG"

    def test_env_override_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "loud")
        with pytest.raises(InvalidConfiguration, match=LOG_LEVEL_ENV_VAR):
            load_app_config()


@pytest.mark.usefixtures("_restore_root_logger")
class TestConfigureLogging:
    """Tests for configure_logging from AppConfig."""

    def test_applies_level(self) -> None:
        configure_logging(AppConfig(logging=LoggingConfig(level="WARNING")))
        assert logging.getLogger().level == logging.WARNING

    def test_structured_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "render.jsonl"
        configure_logging(
            AppConfig(logging=LoggingConfig(level="INFO", structured=True, filename=str(log_file)))
        )
        logging.getLogger("framekit.test").info("frame %d evaluated", 3)
        for handler in logging.getLogger().handlers:
            handler.flush()
        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "frame 3 evaluated"
        assert entry["level"] == "INFO"
