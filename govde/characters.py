"""
Character handling and phonology for Govde.

Provides the Turkish alphabet tables, vowel classification, syllable
counting, vowel harmony checks, last consonant devoicing and the
optional (buffer) letter check used while stripping suffixes.
"""

from typing import AbstractSet, Optional

# ============================================================================
# Alphabet Tables
# ============================================================================

ALPHABET = "abcçdefgğhıijklmnoöprsştuüvyz"
VOWELS = "üiıueöao"
CONSONANTS = "bcçdfgğhjklmnprsştvyz"

# Roundness
ROUNDED_VOWELS = "oöuü"
UNROUNDED_VOWELS = "iıea"
# Vowels that may follow a rounded vowel in a harmonic word
FOLLOWING_ROUNDED_VOWELS = "aeuü"

# Frontness
FRONT_VOWELS = "eiöü"
BACK_VOWELS = "ıuao"

_ALPHABET_SET = frozenset(ALPHABET)
_VOWEL_SET = frozenset(VOWELS)
_CONSONANT_SET = frozenset(CONSONANTS)


# ============================================================================
# Last Consonant (Devoicing) Table
# ============================================================================

# Voiced stop -> voiceless stop at the end of a stem
DEVOICING_HASH = {
    "b": "p",
    "c": "ç",
    "d": "t",
    "ğ": "k",
}


# ============================================================================
# Character Testing Functions
# ============================================================================

def is_vowel(char: str) -> bool:
    """Check if a character is a Turkish vowel."""
    return char in _VOWEL_SET


def is_consonant(char: str) -> bool:
    """Check if a character is a Turkish consonant."""
    return char in _CONSONANT_SET


def is_turkish(word: str) -> bool:
    """
    Check if every character of a word belongs to the Turkish alphabet.

    Only lowercase letters are accepted, so an empty word is trivially
    Turkish and mixed case words are not.
    """
    return all(char in _ALPHABET_SET for char in word)


def vowels(word: str) -> str:
    """
    Get the vowels of a word.

    Args:
        word: The word to analyze.

    Returns:
        The word with all consonants removed, order preserved.

    Example:
        >>> vowels("ükulş")
        'üu'
    """
    return "".join(char for char in word if char not in _CONSONANT_SET)


def count_syllables(word: str) -> int:
    """Count syllables of a word, i.e. the number of its vowels."""
    return len(vowels(word))


# ============================================================================
# Vowel Harmony
# ============================================================================

def has_frontness(vowel: str, candidate: str) -> bool:
    """Check if both vowels are front vowels or both are back vowels."""
    return ((vowel in FRONT_VOWELS and candidate in FRONT_VOWELS) or
            (vowel in BACK_VOWELS and candidate in BACK_VOWELS))


def has_roundness(vowel: str, candidate: str) -> bool:
    """
    Check the roundness rule between two consecutive vowels.

    Either both vowels are unrounded, or the first one is rounded and the
    second one may follow a rounded vowel.
    """
    return ((vowel in UNROUNDED_VOWELS and candidate in UNROUNDED_VOWELS) or
            (vowel in ROUNDED_VOWELS and candidate in FOLLOWING_ROUNDED_VOWELS))


def vowel_harmony(vowel: str, candidate: str) -> bool:
    """Check if two consecutive vowels agree in roundness and frontness."""
    return has_roundness(vowel, candidate) and has_frontness(vowel, candidate)


def has_vowel_harmony(word: str) -> bool:
    """
    Check vowel harmony between the last two vowels of a word.

    Words with fewer than two vowels are considered harmonic.

    Example:
        >>> has_vowel_harmony("okul")
        True
        >>> has_vowel_harmony("okuler")
        False
    """
    word_vowels = vowels(word)
    if len(word_vowels) < 2:
        return True
    return vowel_harmony(word_vowels[-2], word_vowels[-1])


# ============================================================================
# Consonants and Optional Letters
# ============================================================================

def last_consonant(word: str, exceptions: Optional[AbstractSet[str]] = None) -> str:
    """
    Devoice the last consonant of a word (b->p, c->ç, d->t, ğ->k).

    Args:
        word: The word to process.
        exceptions: Words that keep their voiced final consonant.

    Returns:
        The word with its final character devoiced, or the word itself.

    Example:
        >>> last_consonant("kebab")
        'kebap'
    """
    if not word or (exceptions is not None and word in exceptions):
        return word
    last_char = word[-1]
    return word[:-1] + DEVOICING_HASH.get(last_char, last_char)


def valid_optional_letter(word: str, candidate: str) -> bool:
    """
    Check whether an optional letter at the end of a word can be elided.

    A buffer vowel needs a consonant before it and a buffer consonant
    needs a vowel before it.

    Args:
        word: The word still carrying the candidate letter at its end.
        candidate: The optional letter.

    Returns:
        True if the letter before the candidate agrees with the rule.
    """
    if len(word) < 2:
        return False
    previous_char = word[-2]
    if is_vowel(candidate):
        return is_consonant(previous_char)
    return is_vowel(previous_char)
