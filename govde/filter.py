"""
Token filter for text indexing pipelines.

The pipeline hands over one token at a time and takes back a replacement
token. Tokens flagged as keywords pass through untouched.

Usage:
    factory = TurkishStemmerFilterFactory(FilterSettings())
    token_filter = factory.create()
    list(token_filter.filter(["kitapları", "okudum"]))
"""

import logging
from typing import Container, Iterable, Iterator, Optional

from govde.loading.wordlists import load_word_list_or_default
from govde.models import FilterSettings
from govde.settings import (
    PROTECTED_WORDS,
    VOWEL_HARMONY_EXCEPTIONS,
    LAST_CONSONANT_EXCEPTIONS,
    AVERAGE_STEM_SIZE_EXCEPTIONS,
)
from govde.stemmer import TurkishStemmer

logger = logging.getLogger(__name__)

# Name under which the filter is registered in a pipeline
FILTER_NAME = "turkish_stemmer"


class TurkishStemmerTokenFilter:
    """Replaces each token with its stem."""

    def __init__(self, stemmer: TurkishStemmer):
        self.stemmer = stemmer

    def filter(self, tokens: Iterable[str],
               keywords: Optional[Container[str]] = None) -> Iterator[str]:
        """
        Stem a stream of tokens.

        Args:
            tokens: Tokens in stream order.
            keywords: Tokens to leave unchanged.

        Yields:
            One token per input token.
        """
        for token in tokens:
            if keywords is not None and token in keywords:
                yield token
            else:
                yield self.stemmer.stem(token)

    def __call__(self, token: str) -> str:
        return self.stemmer.stem(token)


class TurkishStemmerFilterFactory:
    """
    Builds token filters sharing one stemmer.

    The exception word lists are loaded once, when the factory is created.
    A configured list that cannot be read is replaced by the bundled one.
    """

    name = FILTER_NAME

    def __init__(self, settings: Optional[FilterSettings] = None):
        self.settings = settings or FilterSettings()
        self.stemmer = TurkishStemmer(
            protected_words=self._load(PROTECTED_WORDS),
            vowel_harmony_exceptions=self._load(VOWEL_HARMONY_EXCEPTIONS),
            last_consonant_exceptions=self._load(LAST_CONSONANT_EXCEPTIONS),
            average_stem_size_exceptions=self._load(AVERAGE_STEM_SIZE_EXCEPTIONS),
        )

    def _load(self, kind: str):
        return load_word_list_or_default(self.settings.path_for(kind), kind)

    def create(self) -> TurkishStemmerTokenFilter:
        """Create a token filter."""
        return TurkishStemmerTokenFilter(self.stemmer)
