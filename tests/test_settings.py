import importlib
import json
import logging

from settings import AppConfig


def test_defaults():
    assert AppConfig.get_value("table_name") == "Books"
    assert AppConfig.get_value("storage_backend") == "dynamodb"
    assert AppConfig.get_value("aws_region") is None
    assert AppConfig.get_bool("strict_isbn") is True
    assert AppConfig.get_value("unknown_key", "fallback") == "fallback"


def test_environment_overrides_file_and_defaults(monkeypatch, tmp_path):
    config_file = tmp_path / "app_config.json"
    config_file.write_text(json.dumps({"table_name": "FromFile", "log_level": "DEBUG"}))
    monkeypatch.setenv("BOOKSTORE_CONFIG_PATH", str(config_file))
    monkeypatch.setenv("BOOKSTORE_TABLE_NAME", "FromEnv")

    assert AppConfig.get_value("table_name") == "FromEnv"
    assert AppConfig.get_value("log_level") == "DEBUG"
    assert AppConfig.get_value("storage_backend") == "dynamodb"


def test_local_config_json_is_used_when_path_missing(tmp_path):
    # conftest chdirs into tmp_path and points BOOKSTORE_CONFIG_PATH at a missing file
    (tmp_path / "config.json").write_text(json.dumps({"strict_isbn": False}))
    assert AppConfig.get_bool("strict_isbn") is False


def test_broken_config_file_falls_back_to_defaults(monkeypatch, tmp_path, caplog):
    config_file = tmp_path / "app_config.json"
    config_file.write_text("{not json")
    monkeypatch.setenv("BOOKSTORE_CONFIG_PATH", str(config_file))

    assert AppConfig.get_value("table_name") == "Books"
    assert "Error loading configuration" in caplog.text


def test_get_bool_parses_env_strings(monkeypatch):
    for raw, expected in [("true", True), ("YES", True), ("1", True), ("false", False), ("0", False), ("", False)]:
        monkeypatch.setenv("BOOKSTORE_STRICT_ISBN", raw)
        assert AppConfig.get_bool("strict_isbn") is expected


def test_get_log_level_accepts_known_names(monkeypatch):
    assert AppConfig.get_log_level() == logging.INFO
    monkeypatch.setenv("BOOKSTORE_LOG_LEVEL", "debug")
    assert AppConfig.get_log_level() == logging.DEBUG


def test_get_log_level_falls_back_to_info(monkeypatch, caplog):
    monkeypatch.setenv("BOOKSTORE_LOG_LEVEL", "verbose")
    assert AppConfig.get_log_level() == logging.INFO
    assert "Unknown log_level 'VERBOSE'" in caplog.text


def test_entry_point_imports_with_unknown_log_level(monkeypatch):
    import lambdas.books

    monkeypatch.setenv("BOOKSTORE_LOG_LEVEL", "verbose")
    module = importlib.reload(lambdas.books)
    assert module.logger.level == logging.INFO
