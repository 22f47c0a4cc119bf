import json

import pytest

from plasma_frames.config.render_config import RenderConfig, DEFAULT_CONFIG
from plasma_frames.config.settings import Config
from plasma_frames.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("WIDTH", "HEIGHT", "FRAMES", "OUTPUT_DIR", "PREFIX", "WORKERS", "LOG_LEVEL"):
        monkeypatch.delenv(f"PLASMA_{key}", raising=False)


def test_defaults():
    config = Config.load()
    assert config == DEFAULT_CONFIG
    assert (config.width, config.height, config.frames) == (960, 540, 240)
    assert config.workers == 1


def test_frame_path_padding():
    assert RenderConfig(frames=30).frame_path(7) == "out-py-007.ppm"
    assert RenderConfig(frames=1000).frame_path(999) == "out-py-999.ppm"
    assert RenderConfig(frames=1001).frame_path(12) == "out-py-0012.ppm"
    assert RenderConfig(frames=1, prefix="p").frame_path(0) == "p-000.ppm"


def test_file_values(tmp_path):
    path = tmp_path / "render.json"
    path.write_text(json.dumps({"frames": 30, "prefix": "quick"}))

    config = Config.load(str(path))
    assert config.frames == 30
    assert config.prefix == "quick"
    assert config.width == 960


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "render.json"
    path.write_text(json.dumps({"frames": 30, "width": 320}))
    monkeypatch.setenv("PLASMA_FRAMES", "12")
    monkeypatch.setenv("PLASMA_OUTPUT_DIR", "/tmp/frames")

    config = Config.load(str(path))
    assert config.frames == 12
    assert config.width == 320
    assert config.output_dir == "/tmp/frames"


def test_overrides_win(monkeypatch):
    monkeypatch.setenv("PLASMA_WORKERS", "2")
    config = Config.load(overrides={"workers": 4, "height": None})
    assert config.workers == 4
    assert config.height == 540


def test_missing_file_uses_defaults(tmp_path):
    assert Config.load(str(tmp_path / "absent.json")) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "overrides",
    [{"frames": 0}, {"width": -4}, {"workers": 0}, {"height": "tall"}, {"prefix": ""}],
)
def test_invalid_values(overrides):
    with pytest.raises(ConfigError):
        Config.load(overrides=overrides)


def test_invalid_environment_integer(monkeypatch):
    monkeypatch.setenv("PLASMA_HEIGHT", "big")
    with pytest.raises(ConfigError, match="PLASMA_HEIGHT"):
        Config.load()


def test_unknown_file_keys(tmp_path):
    path = tmp_path / "render.json"
    path.write_text(json.dumps({"palette": "fire"}))
    with pytest.raises(ConfigError, match="palette"):
        Config.load(str(path))


def test_malformed_file(tmp_path):
    path = tmp_path / "render.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        Config.load(str(path))


@pytest.mark.parametrize(
    "values", [{"output_dir": 5}, {"prefix": ["a"]}, {"log_level": 10}]
)
def test_non_string_file_values(tmp_path, values):
    path = tmp_path / "render.json"
    path.write_text(json.dumps(values))
    with pytest.raises(ConfigError, match=next(iter(values))):
        Config.load(str(path))


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
