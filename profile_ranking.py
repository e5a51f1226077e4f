import argparse
import logging
import os
import time

from nearest_words.app.nearest_words_analysis import build_metric, load_word_lists
from nearest_words.config import DEFAULT_SETTINGS, apply_settings_defaults, load_settings
from nearest_words.ranking.average_distance import CacheScope, RankingAlgorithm
from nearest_words.storage.word_list_store import write_words_to_txt


def run_ranking(source, dictionary, metric, scope, workers):
    algorithm = RankingAlgorithm(metric, cache_scope=scope, workers=workers)
    start = time.perf_counter()
    ranked = algorithm.rank(source, dictionary)
    elapsed_ms = (time.perf_counter() - start) * 1000
    print(f"Scope {scope.value}: {len(ranked)} words ranked in {elapsed_ms:.1f} ms")
    return ranked, elapsed_ms


def resolve_settings(args):
    if args.settings:
        settings = load_settings(args.settings)
    elif os.path.exists(os.path.join(os.getcwd(), "settings.json")):
        settings = load_settings()
    else:
        settings = dict(DEFAULT_SETTINGS)

    overrides = {
        "source_path": args.source or None,
        "dictionary_path": args.dictionary or None,
        "metric": args.metric,
        "workers": args.workers,
        "result_limit": args.limit,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})
    return apply_settings_defaults(settings)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Rank dictionary words by average edit distance to a source text."
    )
    parser.add_argument("--settings", type=str, default="", help="Path to settings.json.")
    parser.add_argument("--source", type=str, default="", help="Source text file.")
    parser.add_argument("--dictionary", type=str, default="", help="Dictionary file, one word per line.")
    parser.add_argument("--metric", choices=["levenshtein", "index"], default=None)
    parser.add_argument(
        "--scope",
        choices=[scope.value for scope in CacheScope] + ["all"],
        default=None,
        help="Distance cache scope; 'all' times every scope.",
    )
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--limit", type=int, default=None, help="Number of results to print; 0 prints all.")
    parser.add_argument("--output", type=str, default="", help="Write the full ranking to this file.")
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args(argv)
    if args.workers is not None and args.workers < 1:
        raise SystemExit("--workers must be >= 1")
    if args.limit is not None and args.limit < 0:
        raise SystemExit("--limit must be >= 0")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = resolve_settings(args)
    source, dictionary = load_word_lists(settings)
    if not source:
        raise SystemExit(f"Source word list is empty: {settings['source_path']}")

    print(f"Source: {settings['source_path']} ({len(source)} words)")
    print(f"Dictionary: {settings['dictionary_path']} ({len(dictionary)} words)")

    scope_name = args.scope or settings["cache_scope"]
    scopes = list(CacheScope) if scope_name == "all" else [CacheScope.parse(scope_name)]

    metric = build_metric(settings["metric"], dictionary)
    ranked = None
    for scope in scopes:
        result, _ = run_ranking(source, dictionary, metric, scope, settings["workers"])
        if ranked is not None and result != ranked:
            raise SystemExit(f"Scope {scope.value} produced a different ranking.")
        ranked = result

    print(" ".join(ranked.head(settings["result_limit"])))
    if args.output:
        count = write_words_to_txt(args.output, ranked)
        print(f"Ranking file: {args.output} ({count} words)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
