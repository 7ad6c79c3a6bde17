"""
Shared fixtures for govde tests.
"""

import pytest

from govde.stemmer import TurkishStemmer


@pytest.fixture(scope="session")
def stemmer():
    """Stemmer using the bundled word lists."""
    return TurkishStemmer()


@pytest.fixture(scope="session")
def bare_stemmer():
    """Stemmer without any exception words."""
    return TurkishStemmer(
        protected_words=set(),
        vowel_harmony_exceptions=set(),
        last_consonant_exceptions=set(),
        average_stem_size_exceptions=set(),
    )


@pytest.fixture
def word_list_file(tmp_path):
    """Factory writing a word list file and returning its path."""
    def write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return write
