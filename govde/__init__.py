"""
Govde: Turkish Stemmer
A suffix stripping stemmer for Turkish built on three state machines.
"""

import threading
from typing import Optional

__version__ = "0.1.0"

_default_stemmer = None
_default_lock = threading.Lock()


def get_stemmer():
    """
    Get the process-wide stemmer using the bundled word lists.

    The stemmer is built on first use and shared afterwards.

    Raises:
        WordListError: If a bundled word list cannot be loaded.
    """
    global _default_stemmer
    if _default_stemmer is None:
        with _default_lock:
            if _default_stemmer is None:
                from govde.stemmer import TurkishStemmer
                _default_stemmer = TurkishStemmer()
    return _default_stemmer


def stem(word: str, stemmer: Optional[object] = None) -> str:
    """
    Stem a single lowercase Turkish token.

    This is the main high-level API.

    Args:
        word: Token to stem.
        stemmer: Optional TurkishStemmer. If None, uses the default one.

    Returns:
        The stem, or the token itself when it is not stemmed.

    Example:
        >>> import govde
        >>> govde.stem("satıyorsunuz")
        'satıyor'
    """
    if stemmer is None:
        stemmer = get_stemmer()
    return stemmer.stem(word)
