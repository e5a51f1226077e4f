import logging

from nearest_words.config import apply_settings_defaults, resolve_settings_path
from nearest_words.distance.index_distance import IndexDistanceMetric
from nearest_words.distance.levenshtein import LevenshteinDistance
from nearest_words.distance.metric import DistanceMetric
from nearest_words.domain.words import WordList, as_word_list
from nearest_words.ranking.average_distance import CacheScope, RankingAlgorithm
from nearest_words.storage.word_list_store import read_dictionary, read_source_text


logger = logging.getLogger(__name__)


def build_metric(name, dictionary=None) -> DistanceMetric:
    name = (name or "levenshtein").strip().lower()
    if name == "levenshtein":
        return LevenshteinDistance()
    if name == "index":
        if dictionary is None:
            raise ValueError("The index metric needs a reference dictionary.")
        return IndexDistanceMetric(dictionary)
    raise ValueError(f"Unknown distance metric: {name!r}")


def find_nearest_words(
    source,
    dictionary,
    *,
    metric="levenshtein",
    cache_scope=CacheScope.PER_WORD,
    workers=1,
    limit=0,
) -> WordList:
    source = as_word_list(source)
    dictionary = as_word_list(dictionary)
    if isinstance(metric, str):
        metric = build_metric(metric, dictionary)
    elif not isinstance(metric, DistanceMetric):
        raise TypeError("metric must be a metric name or implement DistanceMetric")

    algorithm = RankingAlgorithm(metric, cache_scope=cache_scope, workers=workers)
    ranked = algorithm.rank(source, dictionary)
    logger.info(
        "Ranked %d dictionary words against %d source words",
        len(ranked),
        len(source),
    )
    return ranked.head(limit)


def load_word_lists(settings, *, cwd=None):
    settings = apply_settings_defaults(settings)
    uppercase = settings["uppercase"]
    source = read_source_text(
        resolve_settings_path(settings["source_path"], cwd), uppercase=uppercase
    )
    dictionary = read_dictionary(
        resolve_settings_path(settings["dictionary_path"], cwd), uppercase=uppercase
    )
    return source, dictionary


def find_nearest_words_from_settings(settings, *, cwd=None) -> WordList:
    settings = apply_settings_defaults(settings)
    source, dictionary = load_word_lists(settings, cwd=cwd)
    return find_nearest_words(
        source,
        dictionary,
        metric=settings["metric"],
        cache_scope=settings["cache_scope"],
        workers=settings["workers"],
        limit=settings["result_limit"],
    )
