"""
Command line interface for govde.

Usage:
    govde kitapları okudum          # one stem per line
    govde -c satıyorsunuz           # ranked candidates
    govde -j satıyorsunuz           # JSON lines
    echo "kitapları okudum" | govde --stdin
"""

import argparse
import logging
import sys
from typing import Iterator, List, Optional

from govde import __version__, settings
from govde.filter import TurkishStemmerFilterFactory
from govde.loading.wordlists import WordListError
from govde.models import FilterSettings, StemResult


def _read_tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Command line interface for Govde (Turkish Stemmer)',
        prog='govde',
    )

    parser.add_argument(
        'words',
        nargs='*',
        help='Lowercase Turkish words to stem',
    )

    parser.add_argument(
        '-s', '--stdin',
        action='store_true',
        help='Read whitespace separated words from standard input',
    )

    parser.add_argument(
        '-c', '--candidates',
        action='store_true',
        help='Print all ranked candidate stems of each word',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print one JSON object per word',
    )

    parser.add_argument(
        '--protected-words',
        type=str,
        default=None,
        metavar='PATH',
        help='Word list of words that are never stemmed',
    )

    parser.add_argument(
        '--vowel-harmony-exceptions',
        type=str,
        default=None,
        metavar='PATH',
        help='Word list of words stripped even without vowel harmony',
    )

    parser.add_argument(
        '--last-consonant-exceptions',
        type=str,
        default=None,
        metavar='PATH',
        help='Word list of stems whose final consonant is kept',
    )

    parser.add_argument(
        '--average-stem-size-exceptions',
        type=str,
        default=None,
        metavar='PATH',
        help='Word list of stems always ranked first',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'govde {__version__}')
        return 0

    if parsed.words:
        words = iter(parsed.words)
    elif parsed.stdin:
        words = _read_tokens(sys.stdin)
    else:
        parser.print_help()
        return 1

    _configure_logging()

    try:
        filter_settings = FilterSettings.from_env(
            protected_words_path=parsed.protected_words,
            vowel_harmony_exceptions_path=parsed.vowel_harmony_exceptions,
            last_consonant_exceptions_path=parsed.last_consonant_exceptions,
            average_stem_size_exceptions_path=parsed.average_stem_size_exceptions,
        )
        stemmer = TurkishStemmerFilterFactory(filter_settings).stemmer
    except WordListError as e:
        print(f'Error loading word lists: {e}', file=sys.stderr)
        return 1

    for word in words:
        if parsed.json:
            print(StemResult.from_stemmer(stemmer, word).model_dump_json())
        elif parsed.candidates:
            print(f"{word}: {' '.join(stemmer.candidates(word))}")
        else:
            print(stemmer.stem(word))

    return 0


if __name__ == '__main__':
    sys.exit(main())
