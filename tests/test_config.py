#!/usr/bin/env python3
import json
import os

from numguess.base.config import DEFAULT_CONFIGS, GameConfig


def read_json(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def test_missing_files_are_created_with_defaults(tmp_path):
    config_dir = tmp_path / "config"
    config = GameConfig(config_dir=str(config_dir), environ={})

    assert config.get("game.min_number") == 1
    assert config.get("game.max_number") == 10
    assert config.get("game.autostart") is True
    assert read_json(config_dir / "game_config.json") == DEFAULT_CONFIGS["game"]
    assert read_json(config_dir / "system_config.json") == DEFAULT_CONFIGS["system"]


def test_file_values_are_layered_over_defaults(tmp_path):
    (tmp_path / "game_config.json").write_text(json.dumps({"max_number": 100}))
    config = GameConfig(config_dir=str(tmp_path), environ={})
    assert config.get("game.min_number") == 1
    assert config.get("game.max_number") == 100


def test_non_object_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "game_config.json").write_text("[1, 2, 3]")
    config = GameConfig(config_dir=str(tmp_path), environ={})
    assert config.get_all("game") == DEFAULT_CONFIGS["game"]


def test_unreadable_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "system_config.json").write_text("{broken")
    config = GameConfig(config_dir=str(tmp_path), environ={})
    assert config.get("system.save_path") == DEFAULT_CONFIGS["system"]["save_path"]


def test_environment_overrides(tmp_path):
    config = GameConfig(config_dir=str(tmp_path), environ={
        "NUMGUESS_MIN_NUMBER": "2",
        "NUMGUESS_MAX_NUMBER": "20",
        "NUMGUESS_SAVE_PATH": "elsewhere/save.json",
        "NUMGUESS_LOG_LEVEL": "DEBUG",
    })
    assert config.get("game.min_number") == 2
    assert config.get("game.max_number") == 20
    assert config.get("system.save_path") == "elsewhere/save.json"
    assert config.get("system.log_level") == "DEBUG"


def test_invalid_environment_value_is_ignored(tmp_path):
    config = GameConfig(config_dir=str(tmp_path), environ={"NUMGUESS_MAX_NUMBER": "lots"})
    assert config.get("game.max_number") == 10


def test_config_dir_from_environment(tmp_path):
    config = GameConfig(environ={"NUMGUESS_CONFIG_DIR": str(tmp_path / "from_env")})
    assert config.config_dir == os.path.abspath(str(tmp_path / "from_env"))
    assert (tmp_path / "from_env" / "game_config.json").exists()


def test_get_missing_key_returns_default(tmp_path):
    config = GameConfig(config_dir=str(tmp_path), environ={})
    assert config.get("game.nothing_here", "fallback") == "fallback"
    assert config.get("nodomain.key") is None
    assert config.get_all("nodomain") == {}


def test_set_and_save_round_trip(tmp_path):
    config = GameConfig(config_dir=str(tmp_path), environ={})
    config.set("game.max_number", 42)
    assert config.save("game")
    assert config.save("nodomain") is False

    reloaded = GameConfig(config_dir=str(tmp_path), environ={})
    assert reloaded.get("game.max_number") == 42


def test_reload_picks_up_file_changes(tmp_path):
    config = GameConfig(config_dir=str(tmp_path), environ={})
    (tmp_path / "game_config.json").write_text(json.dumps({"min_number": 5, "max_number": 6}))
    config.reload()
    assert config.get("game.min_number") == 5


def test_validate(tmp_path):
    config = GameConfig(config_dir=str(tmp_path), environ={})
    assert config.validate() == (True, [])

    config.set("game.min_number", 10)
    is_valid, errors = config.validate()
    assert not is_valid
    assert len(errors) == 1

    config.set("game.min_number", "one")
    config.set("system.save_path", "")
    is_valid, errors = config.validate()
    assert not is_valid
    assert len(errors) == 2


def test_checkout_config_dir_is_preferred(tmp_path, monkeypatch):
    checkout = tmp_path / "checkout"
    (checkout / "config").mkdir(parents=True)
    monkeypatch.setattr("numguess.base.config.PROJECT_ROOT", str(checkout))
    config = GameConfig(environ={})
    assert config.config_dir == str(checkout / "config")


def test_installed_package_uses_working_directory(tmp_path, monkeypatch):
    site_packages = tmp_path / "site-packages"
    site_packages.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setattr("numguess.base.config.PROJECT_ROOT", str(site_packages))
    monkeypatch.chdir(work)

    config = GameConfig(environ={})

    assert config.config_dir == os.path.abspath(str(work / "config"))
    assert (work / "config" / "game_config.json").exists()
    assert not (site_packages / "config").exists()
