"""
Tests for transitions.py - breadth first walk over a stripping machine.
"""

import logging

from govde.states import NOMINAL_VERB_GRAPH, NOUN_GRAPH
from govde.suffixes import NOMINAL_VERB, NOUN, get_suffix
from govde.transitions import Transition, add_transitions, walk


def _transition(graph, start, end, suffix, word="kitap"):
    return Transition(graph.states[start], graph.states[end], word, suffix)


class TestTransition:
    """Tests for the Transition record."""

    def test_similar(self):
        """Test transitions joining the same states are similar."""
        s1 = get_suffix(NOMINAL_VERB, "S1")
        s3 = get_suffix(NOMINAL_VERB, "S3")
        first = _transition(NOMINAL_VERB_GRAPH, "A", "B", s1)
        second = _transition(NOMINAL_VERB_GRAPH, "A", "B", s3, word="başka")
        assert first.is_similar(second)

    def test_not_similar(self):
        """Test transitions from different states are not similar."""
        s5 = get_suffix(NOUN, "S1")
        first = _transition(NOUN_GRAPH, "H", "L", s5)
        second = _transition(NOUN_GRAPH, "B", "L", s5)
        assert not first.is_similar(second)

    def test_similar_transitions(self):
        """Test filtering similar transitions out of a list."""
        s4 = get_suffix(NOMINAL_VERB, "S4")
        s3 = get_suffix(NOMINAL_VERB, "S3")
        s9 = get_suffix(NOMINAL_VERB, "S9")
        first = _transition(NOMINAL_VERB_GRAPH, "A", "B", s4)
        others = [
            _transition(NOMINAL_VERB_GRAPH, "A", "D", s9),
            _transition(NOMINAL_VERB_GRAPH, "A", "B", s3),
        ]
        assert first.similar_transitions(others) == [others[1]]

    def test_defaults(self):
        """Test new transitions carry no rollback word and are unmarked."""
        transition = _transition(NOUN_GRAPH, "A", "K", get_suffix(NOUN, "S7"))
        assert transition.rollback_word is None
        assert transition.marked is False

    def test_str(self):
        """Test display form."""
        transition = _transition(NOUN_GRAPH, "A", "K", get_suffix(NOUN, "S7"))
        assert str(transition) == "A(-lArI (S7)) -> K (rollback: None)"


class TestAddTransitions:
    """Tests for the transitions leaving a state."""

    def test_priority_order(self):
        """Test matching suffixes are enqueued in priority order."""
        transitions = add_transitions(
            NOMINAL_VERB_GRAPH, NOMINAL_VERB_GRAPH.initial_state, "satıyorsunuz")
        assert [t.suffix.id for t in transitions] == ["S4", "S9", "S3"]
        assert [t.next_state.name for t in transitions] == ["B", "D", "B"]

    def test_carries_rollback_and_mark(self):
        """Test rollback word and mark are passed to new transitions."""
        transitions = add_transitions(
            NOUN_GRAPH, NOUN_GRAPH.states["C"], "kitapları",
            rollback_word="kitaplarını", marked=True)
        assert transitions
        assert all(t.rollback_word == "kitaplarını" for t in transitions)
        assert all(t.marked for t in transitions)

    def test_no_match(self):
        """Test word without a matching suffix."""
        assert add_transitions(NOUN_GRAPH, NOUN_GRAPH.initial_state, "okul") == []

    def test_dead_end_state(self):
        """Test state without outgoing suffixes."""
        assert add_transitions(NOUN_GRAPH, NOUN_GRAPH.states["K"], "kitapları") == []


class TestWalk:
    """Tests for the walk itself."""

    def test_siblings_pruned_on_final_state(self, bare_stemmer):
        """Test siblings are dropped once a final state is reached."""
        stems = walk(NOMINAL_VERB_GRAPH, "satıyorsunuz", bare_stemmer.apply_suffix)
        assert stems == ["satıyor"]

    def test_all_paths_explored(self, bare_stemmer):
        """Test independent paths all contribute stems."""
        stems = walk(NOUN_GRAPH, "kitapları", bare_stemmer.apply_suffix)
        assert stems == ["kitap", "kitaplar"]

    def test_nothing_stripped(self, bare_stemmer):
        """Test word without matching suffixes gives no stems."""
        assert walk(NOUN_GRAPH, "okul", bare_stemmer.apply_suffix) == []

    def test_strip_refused(self):
        """Test no stems when every step is refused."""
        assert walk(NOMINAL_VERB_GRAPH, "geldim", lambda word, suffix: word) == []

    def test_rollback_to_initial_word(self):
        """Test rollback recovers the word from the final initial state."""
        def strip_accusative_only(word, suffix):
            if suffix.id == "S9":
                return suffix.remove(word)
            return word

        stems = walk(NOUN_GRAPH, "kitaplarını", strip_accusative_only)
        assert stems == ["kitaplarını"]

    def test_rollback_to_intermediate_stem(self, bare_stemmer, caplog):
        """Test rollback recovers the stem of a later final state."""
        def strip_without_locatives(word, suffix):
            if suffix.id in ("S6", "S13", "S14"):
                return word
            return bare_stemmer.apply_suffix(word, suffix)

        with caplog.at_level(logging.DEBUG, logger="govde.transitions"):
            stems = walk(NOUN_GRAPH, "evdekinin", strip_without_locatives)

        # A -(n)Un-> E gives evdeki, E -ki-> D gives evde, D -DA-> B is refused
        assert stems == ["evdeki", "evdekin"]
        assert "roll back to 'evdeki'" in caplog.text

    def test_results_are_distinct(self, bare_stemmer):
        """Test each stem is reported once."""
        stems = walk(NOUN_GRAPH, "kitapları", bare_stemmer.apply_suffix)
        assert len(stems) == len(set(stems))
