# wikr.py - look up a Wikipedia summary from the command line, with a 24h local cache
import argparse
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from rich.console import Console

import wiki_cache
from choose_result import choose_result
from fetch_wikipedia import NoResultsError, WikiError, fetch_summary, search_wikipedia
from loading_animation import LoadingAnimation
from wikr_config import DEFAULT_LANG, DEFAULT_MAX_RESULTS, KNOWN_LANGS, VERSION

console = Console(highlight=False)


@dataclass(frozen=True)
class ResolvedSummary:
    text: str
    url: str
    served_from_cache: bool


def get_wikipedia_summary(lang: str, title: str, stream=None) -> ResolvedSummary:
    """Summary for an exact title: from the cache if fresh, otherwise fetched and cached."""
    with LoadingAnimation(stream=stream):
        entry = wiki_cache.get_cached_entry(lang, title)
        if entry is None:
            summary, url = fetch_summary(lang, title)
    if entry is not None:
        return ResolvedSummary(entry.summary, entry.url, served_from_cache=True)

    wiki_cache.put_cached_entry(lang, title, summary, url)
    return ResolvedSummary(summary, url, served_from_cache=False)


def resolve_and_fetch(lang: str, phrase: str, max_results: int = DEFAULT_MAX_RESULTS,
                      stream=None, read_line: Optional[Callable[[str], str]] = None) -> ResolvedSummary:
    titles = search_wikipedia(lang, phrase)
    if not titles:
        raise NoResultsError(f"no results for {phrase!r}")
    title = choose_result(titles, max_results, read_line=read_line)
    return get_wikipedia_summary(lang, title, stream=stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikr",
        usage="%(prog)s [options] <search term>",
        description="Show the Wikipedia summary for a search term.",
        epilog=(
            "examples:\n"
            "  wikr -lang en -max 10 Golang\n"
            "  wikr en Berlin\n"
            "  wikr -clear-cache\n"
            "  wikr -version"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-lang", "--lang", default=None,
                        help=f"language of the Wikipedia (default: {DEFAULT_LANG})")
    parser.add_argument("-max", "--max", dest="max_results", type=int, default=DEFAULT_MAX_RESULTS,
                        help="maximum amount of result entries to choose from")
    parser.add_argument("-clear-cache", "--clear-cache", dest="clear_cache", action="store_true",
                        help="clear cache and exit")
    parser.add_argument("-version", "--version", dest="version", action="store_true",
                        help="show version")
    parser.add_argument("term", nargs="*", help="search term")
    return parser


def split_language(lang: Optional[str], words: List[str]):
    """`wikr en Berlin` means language en; an explicit -lang wins and keeps all words."""
    if lang is None and words and words[0] in KNOWN_LANGS:
        return words[0], words[1:]
    return lang or DEFAULT_LANG, words


def print_summary(result: ResolvedSummary) -> None:
    console.print("\n\nSummary:", style="blue")
    if result.served_from_cache:
        console.print("(cached)", style="yellow")
    console.print(result.text, markup=False)
    console.print("\nURL:", style="green")
    console.print(result.url, markup=False)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.clear_cache:
        try:
            wiki_cache.clear_cache()
        except OSError as e:
            print(f"❌ Error deleting cache file: {e}")
            return 1
        print("Cache cleared.")
        return 0

    if args.version:
        print("Version:", VERSION)
        return 0

    lang, words = split_language(args.lang, args.term)
    if not words:
        print("Please provide a search term.", file=sys.stderr)
        return 1

    try:
        result = resolve_and_fetch(lang, " ".join(words), args.max_results)
    except NoResultsError:
        print("No results found.")
        return 1
    except WikiError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        return 1

    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
