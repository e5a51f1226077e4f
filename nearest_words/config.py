import json
import os


SETTINGS_FILENAME = "settings.json"
DEFAULT_DICTIONARY_PATH = "words.txt"
DEFAULT_SOURCE_PATH = "source.txt"
DEFAULT_RESULT_LIMIT = 50

METRIC_NAMES = ("levenshtein", "index")
CACHE_SCOPE_NAMES = ("none", "per_word", "run")

DEFAULT_SETTINGS = {
    "dictionary_path": DEFAULT_DICTIONARY_PATH,
    "source_path": DEFAULT_SOURCE_PATH,
    "metric": "levenshtein",
    "cache_scope": "per_word",
    "workers": 1,
    "result_limit": DEFAULT_RESULT_LIMIT,
    "uppercase": True,
}


def _coerce_str(value, default):
    if isinstance(value, str) and value.strip():
        return value
    return default


def _coerce_choice(value, default, choices):
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in choices:
            return lowered
    return default


def _coerce_int(value, default, *, minimum=None):
    if isinstance(value, bool):
        return default
    try:
        value = int(value)
    except (TypeError, ValueError):
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def _coerce_bool(value, default):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "1", "yes", "y"}:
            return True
        if lowered in {"false", "0", "no", "n"}:
            return False
    return default


def get_default_settings_path(cwd=None):
    base = cwd or os.getcwd()
    return os.path.join(base, SETTINGS_FILENAME)


def load_settings(path=None):
    path = path or get_default_settings_path()
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Missing settings.json at '{path}'. Create a settings.json file with "
            "keys: dictionary_path, source_path, metric, cache_scope, workers, "
            "result_limit, uppercase."
        )

    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    return coerce_settings(data)


def coerce_settings(data):
    settings = dict(DEFAULT_SETTINGS)
    if isinstance(data, dict):
        settings["dictionary_path"] = _coerce_str(
            data.get("dictionary_path"), settings["dictionary_path"]
        )
        settings["source_path"] = _coerce_str(data.get("source_path"), settings["source_path"])
        settings["metric"] = _coerce_choice(data.get("metric"), settings["metric"], METRIC_NAMES)
        settings["cache_scope"] = _coerce_choice(
            data.get("cache_scope"), settings["cache_scope"], CACHE_SCOPE_NAMES
        )
        settings["workers"] = _coerce_int(data.get("workers"), settings["workers"], minimum=1)
        settings["result_limit"] = _coerce_int(
            data.get("result_limit"), settings["result_limit"], minimum=0
        )
        settings["uppercase"] = _coerce_bool(data.get("uppercase"), settings["uppercase"])

    return settings


def apply_settings_defaults(settings):
    if not isinstance(settings, dict):
        return dict(DEFAULT_SETTINGS)
    return coerce_settings({key: value for key, value in settings.items() if value is not None})


def resolve_settings_path(path, cwd=None):
    if os.path.isabs(path):
        return path
    base = cwd or os.getcwd()
    return os.path.join(base, path)
