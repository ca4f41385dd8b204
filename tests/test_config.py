import json

import pytest

from mandelbrot.config import ExplorerConfig, load_config, load_settings
from mandelbrot.errors import ConfigError


def test_defaults():
    config = ExplorerConfig()
    assert config.max_iterations == 64
    assert (config.base_width, config.base_height) == (4.0, 4.0)
    assert config.zoom_factor == 0.5
    assert config.escape_threshold == 2.0
    assert config.color_band_count == 5
    assert config.window_title == "Mandelbrot Set Visualizer"
    assert config.hud_label == "Mandelbrot Set"


@pytest.mark.parametrize("kwargs", [
    {"max_iterations": 0},
    {"max_iterations": 4},
    {"color_band_count": 0},
    {"color_band_count": 6},
    {"zoom_factor": 1.0},
    {"zoom_factor": 0.0},
    {"base_width": 0.0},
    {"base_height": -1.0},
    {"escape_threshold": 0.0},
    {"pixel_width": 0},
    {"font_size": 0},
    {"text_color": (256, 0, 0)},
    {"music_volume": 1.5},
    {"fps": 0},
])
def test_invalid_settings_fail_fast(kwargs):
    with pytest.raises(ConfigError):
        ExplorerConfig(**kwargs)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        ExplorerConfig(max_iterations=-1)


def test_packaged_settings_load():
    settings = load_settings()
    assert settings["max_iterations"] == 64
    assert load_config() == ExplorerConfig()


def test_settings_file_and_overrides(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "max_iterations": 128,
        "text_color": [200, 200, 0],
        "hud_label": "Fractal",
    }))
    config = load_config(str(path), max_iterations=256, font_file=None)
    assert config.max_iterations == 256
    assert config.text_color == (200, 200, 0)
    assert config.hud_label == "Fractal"
    assert config.font_file is None


def test_missing_settings_file_falls_back(tmp_path, caplog):
    config = load_config(str(tmp_path / "nope.json"))
    assert config == ExplorerConfig()
    assert "Could not load" in caplog.text


def test_malformed_settings_file_falls_back(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert load_config(str(path)) == ExplorerConfig()
    assert "Could not load" in caplog.text


def test_unknown_keys(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"julia_mode": True}))
    assert load_config(str(path)) == ExplorerConfig()
    assert "julia_mode" in caplog.text

    with pytest.raises(ConfigError):
        ExplorerConfig().with_overrides(julia_mode=True)


def test_invalid_value_in_file_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"zoom_factor": 2.0}))
    with pytest.raises(ConfigError):
        load_config(str(path))
