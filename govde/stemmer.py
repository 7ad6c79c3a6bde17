"""
Turkish stemmer.

Stemming runs three suffix stripping machines one after the other:

1. nominal verb suffixes over the word,
2. noun suffixes over the word and every nominal verb stem,
3. derivational suffixes over the word and every stem found so far.

Every stem produced along the way is a candidate; the final stem is the
candidate ranked first by post_process().

Example:
    >>> from govde.stemmer import TurkishStemmer
    >>> stemmer = TurkishStemmer()
    >>> stemmer.stem("satıyorsunuz")
    'satıyor'
"""

import logging
from functools import cmp_to_key
from typing import FrozenSet, Iterable, List, Optional

from govde.characters import (
    count_syllables,
    has_vowel_harmony,
    is_turkish,
    last_consonant,
    valid_optional_letter,
)
from govde.loading.wordlists import load_default_word_list
from govde.settings import (
    AVERAGE_STEMMED_SIZE,
    PROTECTED_WORDS,
    VOWEL_HARMONY_EXCEPTIONS,
    LAST_CONSONANT_EXCEPTIONS,
    AVERAGE_STEM_SIZE_EXCEPTIONS,
)
from govde.states import NOMINAL_VERB_GRAPH, NOUN_GRAPH, DERIVATIONAL_GRAPH, StateGraph
from govde.suffixes import Suffix
from govde.transitions import walk

logger = logging.getLogger(__name__)


def _word_set(words: Optional[Iterable[str]], kind: str) -> FrozenSet[str]:
    if words is None:
        return load_default_word_list(kind)
    return frozenset(words)


class TurkishStemmer:
    """
    Suffix stripping stemmer for lowercase Turkish tokens.

    The exception sets are fixed at construction; a stemmer holds no other
    state and can be shared between threads.

    Args:
        protected_words: Words that are never stemmed.
        vowel_harmony_exceptions: Words stripped even without vowel harmony.
        last_consonant_exceptions: Stems whose final consonant is not devoiced.
        average_stem_size_exceptions: Stems always ranked first.

    Each argument defaults to the bundled word list when None. An empty
    collection is used as is.

    Raises:
        WordListError: If a bundled word list is needed but cannot be loaded.
    """

    def __init__(self,
                 protected_words: Optional[Iterable[str]] = None,
                 vowel_harmony_exceptions: Optional[Iterable[str]] = None,
                 last_consonant_exceptions: Optional[Iterable[str]] = None,
                 average_stem_size_exceptions: Optional[Iterable[str]] = None):
        self.protected_words = _word_set(protected_words, PROTECTED_WORDS)
        self.vowel_harmony_exceptions = _word_set(
            vowel_harmony_exceptions, VOWEL_HARMONY_EXCEPTIONS)
        self.last_consonant_exceptions = _word_set(
            last_consonant_exceptions, LAST_CONSONANT_EXCEPTIONS)
        self.average_stem_size_exceptions = _word_set(
            average_stem_size_exceptions, AVERAGE_STEM_SIZE_EXCEPTIONS)

    # ------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------

    def stem(self, word: str) -> str:
        """
        Stem a single token.

        Never raises: words that cannot or should not be stemmed are
        returned unchanged.
        """
        if not self.proceed_to_stem(word):
            return word
        return self.post_process(self.collect_stems(word), word)

    def candidates(self, word: str) -> List[str]:
        """
        Get the ranked candidate stems of a token.

        The first element is what stem() returns. Words that are not
        stemmed yield just themselves.
        """
        if not self.proceed_to_stem(word):
            return [word]
        ranked = self.rank(self.collect_stems(word), word)
        return ranked or [word]

    def proceed_to_stem(self, word: str) -> bool:
        """Check if a word is worth stemming at all."""
        if not is_turkish(word):
            return False
        if word in self.protected_words:
            return False
        return count_syllables(word) >= 2

    # ------------------------------------------------------------------------
    # Suffix Application
    # ------------------------------------------------------------------------

    def should_be_marked(self, word: str, suffix: Suffix) -> bool:
        """Check if a suffix may be stripped from a word."""
        if word in self.protected_words:
            return False
        return (not suffix.check_harmony
                or has_vowel_harmony(word)
                or word in self.vowel_harmony_exceptions)

    def apply_suffix(self, word: str, suffix: Suffix) -> str:
        """
        Strip a suffix from a word.

        An optional letter left behind is elided along with the suffix when
        its neighbour allows it; otherwise the whole step is rejected.

        Returns:
            The stripped word, or the word itself when the suffix cannot be
            removed.
        """
        if not self.should_be_marked(word, suffix) or not suffix.matches(word):
            return word

        stripped = suffix.remove(word)
        optional_letter = suffix.optional_letter_of(stripped)
        if optional_letter is not None:
            if not valid_optional_letter(stripped, optional_letter):
                return word
            stripped = stripped[:-1]
        return stripped

    # ------------------------------------------------------------------------
    # Machines
    # ------------------------------------------------------------------------

    def _strip(self, graph: StateGraph, word: str, stems: List[str]) -> List[str]:
        for stem in walk(graph, word, self.apply_suffix):
            if stem not in stems:
                stems.append(stem)
        return stems

    def nominal_verb_suffix_stripper(self, word: str, stems: Optional[List[str]] = None) -> List[str]:
        """Add the stems found by the nominal verb machine to `stems`."""
        return self._strip(NOMINAL_VERB_GRAPH, word, [] if stems is None else stems)

    def noun_suffix_stripper(self, word: str, stems: Optional[List[str]] = None) -> List[str]:
        """Add the stems found by the noun machine to `stems`."""
        return self._strip(NOUN_GRAPH, word, [] if stems is None else stems)

    def derivational_suffix_stripper(self, word: str, stems: Optional[List[str]] = None) -> List[str]:
        """Add the stems found by the derivational machine to `stems`."""
        return self._strip(DERIVATIONAL_GRAPH, word, [] if stems is None else stems)

    def collect_stems(self, word: str) -> List[str]:
        """Run the three machines and return every candidate stem found."""
        stems = self.nominal_verb_suffix_stripper(word)

        for word_to_stem in [word] + list(stems):
            self.noun_suffix_stripper(word_to_stem, stems)

        for word_to_stem in [word] + list(stems):
            self.derivational_suffix_stripper(word_to_stem, stems)

        logger.debug(f"Candidates of '{word}': {stems}")
        return stems

    # ------------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------------

    def compare_stems(self, first: str, second: str) -> int:
        """
        Order two candidates.

        Stems from the average stem size exception list come first; then
        the stem closest to the average stem size, the shorter one on ties.
        """
        if first in self.average_stem_size_exceptions:
            return -1
        if second in self.average_stem_size_exceptions:
            return 1

        distance = (abs(len(first) - AVERAGE_STEMMED_SIZE)
                    - abs(len(second) - AVERAGE_STEMMED_SIZE))
        if distance == 0:
            return len(first) - len(second)
        return distance

    def rank(self, stems: Iterable[str], original_word: str) -> List[str]:
        """
        Rank candidate stems, best first.

        The original word and candidates without a vowel are dropped and
        the last consonant rule is applied to the rest.
        """
        final_stems = {
            last_consonant(stem, self.last_consonant_exceptions)
            for stem in stems
            if stem != original_word and count_syllables(stem) > 0
        }
        return sorted(sorted(final_stems), key=cmp_to_key(self.compare_stems))

    def post_process(self, stems: Iterable[str], original_word: str) -> str:
        """Pick the final stem among the candidates, or the original word."""
        ranked = self.rank(stems, original_word)
        if not ranked:
            return original_word
        return ranked[0]
