import json

import pytest

from nearest_words import config


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError) as excinfo:
        config.load_settings(str(tmp_path / "settings.json"))
    assert "Missing settings.json" in str(excinfo.value)


def test_load_settings_reads_values(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "dictionary_path": "dict.txt",
                "source_path": "lyrics.txt",
                "metric": "Index",
                "cache_scope": "RUN",
                "workers": "4",
                "result_limit": 10,
                "uppercase": "no",
            }
        ),
        encoding="utf-8",
    )

    settings = config.load_settings(str(path))
    assert settings["dictionary_path"] == "dict.txt"
    assert settings["source_path"] == "lyrics.txt"
    assert settings["metric"] == "index"
    assert settings["cache_scope"] == "run"
    assert settings["workers"] == 4
    assert settings["result_limit"] == 10
    assert settings["uppercase"] is False


def test_load_settings_falls_back_on_bad_values(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "dictionary_path": "  ",
                "metric": "cosine",
                "cache_scope": "global",
                "workers": 0,
                "result_limit": -1,
                "uppercase": "maybe",
            }
        ),
        encoding="utf-8",
    )

    settings = config.load_settings(str(path))
    assert settings == config.DEFAULT_SETTINGS


def test_apply_settings_defaults_skips_none():
    merged = config.apply_settings_defaults({"workers": None, "metric": "index"})
    assert merged["workers"] == 1
    assert merged["metric"] == "index"
    assert merged["cache_scope"] == "per_word"


def test_resolve_settings_path(tmp_path):
    assert config.resolve_settings_path("words.txt", str(tmp_path)) == str(tmp_path / "words.txt")
    absolute = str(tmp_path / "other.txt")
    assert config.resolve_settings_path(absolute, "/elsewhere") == absolute


def test_apply_settings_defaults_coerces_bad_values():
    merged = config.apply_settings_defaults(
        {"cache_scope": "global", "metric": "cosine", "workers": "0", "result_limit": "7"}
    )
    assert merged["cache_scope"] == "per_word"
    assert merged["metric"] == "levenshtein"
    assert merged["workers"] == 1
    assert merged["result_limit"] == 7
    assert config.apply_settings_defaults(None) == config.DEFAULT_SETTINGS
