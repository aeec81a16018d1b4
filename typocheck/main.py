"""CLI entry point for the spell checker."""

from __future__ import annotations

import argparse
import logging
import sys

from typocheck.checker import SpellChecker, load_default_dictionary, normalize_query
from typocheck.constants import EXIT_COMMAND, MAX_DISTANCE, MAX_SUGGESTIONS
from typocheck.dictionary import VocabularyUnavailable
from typocheck.display import print_result


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check words against a dictionary and suggest close matches",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Words to check. With none given, start an interactive prompt",
    )
    parser.add_argument(
        "--words-file", "-w",
        type=str,
        default=None,
        help="Word list, one word per line (default: ./words.txt, then the bundled list)",
    )
    parser.add_argument(
        "--max-distance", "-d",
        type=int,
        default=MAX_DISTANCE,
        help=f"Maximum edit distance for suggestions (default: {MAX_DISTANCE})",
    )
    parser.add_argument(
        "--max-suggestions", "-n",
        type=int,
        default=MAX_SUGGESTIONS,
        help=f"Maximum number of suggestions to show (default: {MAX_SUGGESTIONS})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable info-level logging",
    )
    args = parser.parse_args(argv)
    if args.max_distance < 0:
        parser.error("--max-distance must be >= 0")
    if args.max_suggestions < 0:
        parser.error("--max-suggestions must be >= 0")
    return args


def check_words(checker: SpellChecker, words: list[str]) -> bool:
    """Check each word and print the result. Returns True if all were known."""
    all_known = True
    for raw in words:
        word = normalize_query(raw)
        if not word:
            continue
        result = checker.check(word)
        print_result(result)
        all_known = all_known and result.known
    return all_known


def interactive_loop(checker: SpellChecker) -> None:
    """Prompt for words until the user types 'exit' or closes input."""
    print(f"Enter a word to check (type '{EXIT_COMMAND}' to quit):")
    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        word = normalize_query(raw)
        if word == EXIT_COMMAND:
            break
        if not word:
            continue
        print_result(checker.check(word))


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%H:%M:%S",
    )

    limits = {
        "max_distance": args.max_distance,
        "max_suggestions": args.max_suggestions,
    }
    try:
        if args.words_file:
            checker = SpellChecker.from_file(args.words_file, **limits)
        else:
            checker = load_default_dictionary(**limits)
    except VocabularyUnavailable as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        sys.exit(1)

    if args.words:
        if not check_words(checker, args.words):
            sys.exit(1)
        return

    interactive_loop(checker)


if __name__ == "__main__":
    main()
