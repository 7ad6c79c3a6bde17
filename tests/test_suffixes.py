"""
Tests for suffixes.py - suffix tables and matching.
"""

import pytest

from govde.suffixes import (
    NOMINAL_VERB, NOUN, DERIVATIONAL,
    NOMINAL_VERB_SUFFIXES, NOUN_SUFFIXES, DERIVATIONAL_SUFFIXES,
    SUFFIX_TABLES,
    get_suffix,
)


class TestTables:
    """Tests for the suffix tables."""

    def test_sizes(self):
        """Test number of suffixes per machine."""
        assert len(NOMINAL_VERB_SUFFIXES) == 15
        assert len(NOUN_SUFFIXES) == 19
        assert len(DERIVATIONAL_SUFFIXES) == 1

    def test_ids_unique(self):
        """Test suffix ids are unique inside a machine."""
        for table in SUFFIX_TABLES.values():
            ids = [suffix.id for suffix in table]
            assert len(ids) == len(set(ids))

    def test_priority_order(self):
        """Test longer suffixes are tried before their shorter overlaps."""
        ids = [suffix.id for suffix in NOMINAL_VERB_SUFFIXES]
        # -(y)ken before -n
        assert ids.index("S15") < ids.index("S7")
        ids = [suffix.id for suffix in NOUN_SUFFIXES]
        # -nU before -(s)U
        assert ids.index("S9") < ids.index("S6")

    def test_only_ki_skips_harmony(self):
        """Test -ki is the only suffix without a harmony check."""
        skipping = [s for table in SUFFIX_TABLES.values() for s in table if not s.check_harmony]
        assert skipping == [get_suffix(NOUN, "S18")]

    def test_get_suffix_unknown(self):
        """Test unknown suffix id raises KeyError."""
        with pytest.raises(KeyError):
            get_suffix(DERIVATIONAL, "S2")

    def test_equality_by_machine_and_id(self):
        """Test suffixes compare by machine and id."""
        assert get_suffix(NOUN, "S1") == get_suffix(NOUN, "S1")
        assert get_suffix(NOUN, "S1") != get_suffix(NOMINAL_VERB, "S1")

    def test_str(self):
        """Test display form."""
        assert str(get_suffix(NOMINAL_VERB, "S4")) == "-sUnUz (S4)"


class TestMatching:
    """Tests for match/remove/optional letter."""

    def test_matches_end_only(self):
        """Test suffixes only match at the end of a word."""
        suffix = get_suffix(NOMINAL_VERB, "S5")
        assert suffix.matches("saatler")
        assert not suffix.matches("larva")

    def test_remove(self):
        """Test removing a suffix."""
        assert get_suffix(NOMINAL_VERB, "S4").remove("satıyorsunuz") == "satıyor"
        assert get_suffix(NOUN, "S7").remove("telefonları") == "telefon"

    def test_remove_only_last_occurrence(self):
        """Test only the trailing occurrence is removed."""
        assert get_suffix(NOUN, "S1").remove("larlar") == "lar"

    def test_single_letter_suffix(self):
        """Test one-letter suffixes."""
        suffix = get_suffix(NOMINAL_VERB, "S6")
        assert suffix.matches("geldim")
        assert suffix.remove("geldim") == "geldi"

    def test_optional_letter(self):
        """Test buffer letter found at the end of a stripped word."""
        suffix = get_suffix(NOUN, "S8")
        assert suffix.optional_letter_of("kapıy") == "y"
        assert suffix.optional_letter_of("kapı") is None

    def test_optional_letter_alternatives(self):
        """Test suffixes with several possible buffer letters."""
        suffix = get_suffix(NOUN, "S3")
        assert suffix.optional_letter_of("evi") == "i"
        assert suffix.optional_letter_of("okulu") == "u"

    def test_no_optional_letter(self):
        """Test suffixes without a buffer letter."""
        assert get_suffix(NOUN, "S1").optional_letter_of("kitapy") is None

    def test_derivational(self):
        """Test the derivational -lU suffix."""
        suffix = get_suffix(DERIVATIONAL, "S1")
        assert suffix.matches("gozlu")
        assert suffix.remove("gozlu") == "goz"
