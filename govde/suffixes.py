"""
Suffix tables for Govde.

Each stripping machine owns an ordered table of suffixes. The order of a
table is the priority of its suffixes: transitions are enqueued in table
order, so e.g. -(y)ken (S15) is tried before -n (S7) and -nU (S9) before
-(s)U (S6).

A suffix is described by its allomorphs (the removal pattern), an optional
buffer letter that may remain at the end of the stem once the suffix is
removed, and whether the word must be vowel harmonic for the suffix to be
stripped.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

# ============================================================================
# Machine Names
# ============================================================================

NOMINAL_VERB = "nominal_verb"
NOUN = "noun"
DERIVATIONAL = "derivational"


# ============================================================================
# Suffix Definition
# ============================================================================

@dataclass(frozen=True)
class Suffix:
    """
    A single suffix rule.

    Attributes:
        machine: Name of the machine owning the suffix.
        id: Identifier inside its machine (e.g. 'S4').
        name: Morphological notation (e.g. '-sUnUz').
        pattern: Allomorphs separated by '|'.
        optional_letter: Optional buffer letters separated by '|', or None.
        check_harmony: Whether stripping requires vowel harmony.
    """
    machine: str
    id: str
    name: str
    pattern: str = field(compare=False)
    optional_letter: Optional[str] = field(default=None, compare=False)
    check_harmony: bool = field(default=True, compare=False)
    _regex: "re.Pattern[str]" = field(init=False, repr=False, compare=False)
    _optional_regex: Optional["re.Pattern[str]"] = field(
        init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_regex", re.compile(f"({self.pattern})$"))
        optional_regex = None
        if self.optional_letter is not None:
            optional_regex = re.compile(f"({self.optional_letter})$")
        object.__setattr__(self, "_optional_regex", optional_regex)

    def matches(self, word: str) -> bool:
        """Check if the word ends with one of the suffix allomorphs."""
        return self._regex.search(word) is not None

    def remove(self, word: str) -> str:
        """Remove the suffix from the end of the word."""
        return self._regex.sub("", word, count=1)

    def optional_letter_of(self, word: str) -> Optional[str]:
        """
        Get the optional letter left at the end of a stripped word.

        Returns:
            The letter if the suffix declares one and the word ends with it,
            otherwise None.
        """
        if self._optional_regex is None:
            return None
        match = self._optional_regex.search(word)
        if match:
            return match.group()[0]
        return None

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


def _table(machine: str, rows: Tuple[tuple, ...]) -> Tuple[Suffix, ...]:
    return tuple(
        Suffix(machine, suffix_id, name, pattern, optional_letter, check_harmony)
        for suffix_id, name, pattern, optional_letter, check_harmony in rows
    )


# ============================================================================
# Nominal Verb Suffixes
# ============================================================================

#  id     name        pattern                            optional  harmony
NOMINAL_VERB_SUFFIXES: Tuple[Suffix, ...] = _table(NOMINAL_VERB, (
    ("S11", "-cAsInA", "casına|çasına|cesine|çesine",     None,     True),
    ("S4",  "-sUnUz",  "sınız|siniz|sunuz|sünüz",         None,     True),
    ("S14", "-(y)mUş", "muş|miş|müş|mış",                 "y",      True),
    ("S15", "-(y)ken", "ken",                             "y",      True),
    ("S2",  "-sUn",    "sın|sin|sun|sün",                 None,     True),
    ("S5",  "-lAr",    "lar|ler",                         None,     True),
    ("S9",  "-nUz",    "nız|niz|nuz|nüz",                 None,     True),
    ("S10", "-DUr",    "tır|tir|tur|tür|dır|dir|dur|dür", None,     True),
    ("S3",  "-(y)Uz",  "ız|iz|uz|üz",                     "y",      True),
    ("S1",  "-(y)Um",  "ım|im|um|üm",                     "y",      True),
    ("S12", "-(y)DU",  "dı|di|du|dü|tı|ti|tu|tü",         "y",      True),
    ("S13", "-(y)sA",  "sa|se",                           "y",      True),
    ("S6",  "-m",      "m",                               None,     True),
    ("S7",  "-n",      "n",                               None,     True),
    ("S8",  "-k",      "k",                               None,     True),
))


# ============================================================================
# Noun Suffixes
# ============================================================================

#  id     name        pattern                 optional   harmony
NOUN_SUFFIXES: Tuple[Suffix, ...] = _table(NOUN, (
    ("S16", "-nDAn",   "ndan|ntan|nden|nten", None,      True),
    ("S7",  "-lArI",   "ları|leri",           None,      True),
    ("S3",  "-(U)mUz", "mız|miz|muz|müz",     "ı|i|u|ü", True),
    ("S5",  "-(U)nUz", "nız|niz|nuz|nüz",     "ı|i|u|ü", True),
    ("S1",  "-lAr",    "lar|ler",             None,      True),
    ("S14", "-nDA",    "nta|nte|nda|nde",     None,      True),
    ("S15", "-DAn",    "dan|tan|den|ten",     None,      True),
    ("S17", "-(y)lA",  "la|le",               "y",       True),
    ("S10", "-(n)Un",  "ın|in|un|ün",         "n",       True),
    ("S19", "-(n)cA",  "ca|ce",               "n",       True),
    ("S4",  "-Un",     "ın|in|un|ün",         None,      True),
    ("S9",  "-nU",     "nı|ni|nu|nü",         None,      True),
    ("S12", "-nA",     "na|ne",               None,      True),
    ("S13", "-DA",     "da|de|ta|te",         None,      True),
    ("S18", "-ki",     "ki",                  None,      False),
    ("S2",  "-(U)m",   "m",                   "ı|i|u|ü", True),
    ("S6",  "-(s)U",   "ı|i|u|ü",             "s",       True),
    ("S8",  "-(y)U",   "ı|i|u|ü",             "y",       True),
    ("S11", "-(y)A",   "a|e",                 "y",       True),
))


# ============================================================================
# Derivational Suffixes
# ============================================================================

DERIVATIONAL_SUFFIXES: Tuple[Suffix, ...] = _table(DERIVATIONAL, (
    ("S1", "-lU", "lı|li|lu|lü", None, True),
))


SUFFIX_TABLES: Dict[str, Tuple[Suffix, ...]] = {
    NOMINAL_VERB: NOMINAL_VERB_SUFFIXES,
    NOUN: NOUN_SUFFIXES,
    DERIVATIONAL: DERIVATIONAL_SUFFIXES,
}


def get_suffix(machine: str, suffix_id: str) -> Suffix:
    """
    Look up a suffix by machine and id.

    Raises:
        KeyError: If the machine has no such suffix.
    """
    for suffix in SUFFIX_TABLES[machine]:
        if suffix.id == suffix_id:
            return suffix
    raise KeyError(f"{machine} has no suffix {suffix_id}")
