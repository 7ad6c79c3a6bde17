"""
Settings and configuration for Govde.

Paths to the bundled exception word lists and the environment variables
that override them.
"""

import os
from pathlib import Path
from typing import Dict, Optional

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Bundled exception word lists, one word per line, '#' starts a comment
PROTECTED_WORDS = "protected_words"
VOWEL_HARMONY_EXCEPTIONS = "vowel_harmony_exceptions"
LAST_CONSONANT_EXCEPTIONS = "last_consonant_exceptions"
AVERAGE_STEM_SIZE_EXCEPTIONS = "average_stem_size_exceptions"

WORD_LIST_KINDS = (
    PROTECTED_WORDS,
    VOWEL_HARMONY_EXCEPTIONS,
    LAST_CONSONANT_EXCEPTIONS,
    AVERAGE_STEM_SIZE_EXCEPTIONS,
)

DEFAULT_WORD_LIST_PATHS: Dict[str, Path] = {
    kind: DATA_DIR / f"{kind}.txt" for kind in WORD_LIST_KINDS
}

# Environment variables for custom word lists
WORD_LIST_ENV_VARS: Dict[str, str] = {
    kind: f"GOVDE_{kind.upper()}_PATH" for kind in WORD_LIST_KINDS
}

# Comment marker inside word list files
COMMENT_MARKER = "#"

# Stems closest to this length win the ranking
AVERAGE_STEMMED_SIZE = 4

# Debug mode
DEBUG = os.environ.get("GOVDE_DEBUG", "").lower() in ("1", "true", "yes")


def word_list_path_from_env(kind: str) -> Optional[Path]:
    """Return the caller-supplied word list path for `kind`, if any."""
    value = os.environ.get(WORD_LIST_ENV_VARS[kind])
    return Path(value) if value else None
