import json

from ball_blast.config import Config, ProgressStore, DEFAULTS


def test_progress_store_round_trip(tmp_path):
    store = ProgressStore(str(tmp_path / "save.json"))
    assert store.load() is None
    assert store.save({"coins": 12, "upgrades": {"fire_rate": 3}})
    assert store.load() == {"coins": 12, "upgrades": {"fire_rate": 3}}


def test_progress_store_rejects_corrupt_files(tmp_path):
    path = tmp_path / "save.json"
    path.write_text("{not json", encoding="utf-8")
    assert ProgressStore(str(path)).load() is None

    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert ProgressStore(str(path)).load() is None


def test_progress_store_write_failure_returns_false(tmp_path):
    # A directory cannot be opened for writing
    assert ProgressStore(str(tmp_path)).save({"coins": 1}) is False


def test_config_defaults_without_file(tmp_path):
    config = Config(str(tmp_path / "settings.json"))
    assert config.resolution == DEFAULTS["display"]["resolution"]
    assert config.fps == 60
    assert not config.fullscreen
    assert config.resolution_label() == "1280x720"


def test_config_invalid_values_fall_back(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "display": {"resolution": [123, 45], "screen_mode": "fullscreen"},
        "performance": {"fps": 7, "vsync": True},
        "audio": {"sfx_volume": 3.5},
    }), encoding="utf-8")
    config = Config(str(path))
    assert config.resolution == [1280, 720]
    assert config.fullscreen
    assert config.fps == 60
    assert config.vsync is True
    assert config.sfx_volume == 1.0


def test_config_save_and_reload(tmp_path):
    path = str(tmp_path / "settings.json")
    config = Config(path)
    config.resolution = [1600, 900]
    config.fps = 120
    config.sfx_volume = 0.2
    config.save()

    reloaded = Config(path)
    assert reloaded.resolution == [1600, 900]
    assert reloaded.fps == 120
    assert reloaded.sfx_volume == 0.2
