"""
Loading of the stemmer's exception word lists.

Word lists are plain UTF-8 files with one word per line; anything after the
comment marker is ignored. The bundled defaults live in govde/data and must
load, since an empty protected word set silently changes how many common
words are stemmed. Caller-supplied lists are optional: when one cannot be
read the corresponding default is used instead.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

from govde.settings import COMMENT_MARKER, DEFAULT_WORD_LIST_PATHS

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class WordListError(Exception):
    """Raised when a bundled word list cannot be loaded."""

    def __init__(self, kind: str, path: PathLike, reason: str):
        self.kind = kind
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load {kind} word list from '{path}': {reason}")


def parse_word_list(lines: Iterable[str], comment: Optional[str] = COMMENT_MARKER) -> FrozenSet[str]:
    """
    Parse word list lines into a set of words.

    Args:
        lines: Lines of the list.
        comment: Comment marker; text after it is dropped. None disables comments.

    Returns:
        The distinct, stripped, non-empty entries.

    Example:
        >>> sorted(parse_word_list(["kedi", "# hayvanlar", "köpek  # ev", ""]))
        ['kedi', 'köpek']
    """
    words = set()
    for line in lines:
        if comment:
            line = line.split(comment, 1)[0]
        word = line.strip()
        if word:
            words.add(word)
    return frozenset(words)


def load_word_list(path: PathLike, comment: Optional[str] = COMMENT_MARKER) -> FrozenSet[str]:
    """
    Load a word list file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    with Path(path).open("r", encoding="utf-8") as f:
        return parse_word_list(f, comment)


def _check_kind(kind: str) -> Path:
    try:
        return DEFAULT_WORD_LIST_PATHS[kind]
    except KeyError:
        raise ValueError(f"Unknown word list: {kind}") from None


def load_default_word_list(kind: str) -> FrozenSet[str]:
    """
    Load one of the bundled word lists.

    Args:
        kind: One of govde.settings.WORD_LIST_KINDS.

    Raises:
        ValueError: If `kind` is not a known word list.
        WordListError: If the bundled file cannot be read.
    """
    path = _check_kind(kind)
    try:
        words = load_word_list(path)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(kind, path, str(e)) from e
    logger.debug(f"Loaded {len(words)} {kind} from '{path}'")
    return words


def load_word_list_or_default(path: Optional[PathLike], kind: str) -> FrozenSet[str]:
    """
    Load a caller-supplied word list, falling back to the bundled one.

    Args:
        path: Caller-supplied file, or None to use the default.
        kind: Word list kind, used for the fallback.

    Returns:
        The caller's words, or the default words if `path` is None or
        cannot be read. An empty file yields an empty set.
    """
    _check_kind(kind)
    if path is None:
        return load_default_word_list(kind)
    try:
        words = load_word_list(path)
    except FileNotFoundError:
        logger.info(f"Failed to find {kind} at '{path}', using the default set")
        return load_default_word_list(kind)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to load {kind} from '{path}': {e}, using the default set")
        return load_default_word_list(kind)
    logger.info(f"Loaded {len(words)} {kind} from '{path}'")
    return words
