"""
State graphs of the three suffix stripping machines.

A graph is plain data: its states (with initial/final flags and the ordered
suffixes leaving them) and a transition table mapping
(state name, suffix id) -> next state name. States are compared by value,
so two lookups of the same state always agree.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from govde.suffixes import (
    Suffix,
    NOMINAL_VERB, NOUN, DERIVATIONAL,
    NOMINAL_VERB_SUFFIXES, NOUN_SUFFIXES, DERIVATIONAL_SUFFIXES,
)


@dataclass(frozen=True)
class State:
    """A named state of a stripping machine."""
    name: str
    initial: bool
    final: bool
    suffixes: Tuple[str, ...]

    def __str__(self) -> str:
        return self.name


class StateGraph:
    """
    A suffix stripping machine.

    Attributes:
        name: Machine name, shared with its suffix table.
        states: States by name.
        suffixes: Ordered suffix table of the machine.
        table: (state name, suffix id) -> next state name.
    """

    def __init__(self, name: str, suffixes: Tuple[Suffix, ...],
                 states: Iterable[State],
                 table: Dict[Tuple[str, str], str]):
        self.name = name
        self.suffixes = suffixes
        self.states: Dict[str, State] = {state.name: state for state in states}
        self.table = dict(table)
        self._suffix_by_id = {suffix.id: suffix for suffix in suffixes}
        self.validate()
        self.initial_state = next(s for s in self.states.values() if s.initial)

    def next_state(self, state: State, suffix: Suffix) -> Optional[State]:
        """Get the state reached from `state` by stripping `suffix`, if any."""
        name = self.table.get((state.name, suffix.id))
        if name is None:
            return None
        return self.states[name]

    def suffixes_of(self, state: State) -> List[Suffix]:
        """
        Get the suffixes leaving a state, in priority order.

        Priority follows the machine's suffix table, not the order in
        which the state lists them.
        """
        allowed = set(state.suffixes)
        return [suffix for suffix in self.suffixes if suffix.id in allowed]

    def validate(self) -> None:
        """
        Check that the graph is closed.

        Raises:
            ValueError: If a state uses an unknown suffix, a transition
                points outside the graph, or there is not exactly one
                initial state.
        """
        initial = [s for s in self.states.values() if s.initial]
        if len(initial) != 1:
            raise ValueError(f"{self.name}: expected one initial state, got {len(initial)}")

        for state in self.states.values():
            for suffix_id in state.suffixes:
                if suffix_id not in self._suffix_by_id:
                    raise ValueError(f"{self.name}: state {state.name} uses unknown suffix {suffix_id}")
                if (state.name, suffix_id) not in self.table:
                    raise ValueError(f"{self.name}: no transition for {state.name}({suffix_id})")

        for (start, suffix_id), end in self.table.items():
            if start not in self.states or end not in self.states:
                raise ValueError(f"{self.name}: transition {start}({suffix_id}) -> {end} leaves the graph")
            if suffix_id not in self.states[start].suffixes:
                raise ValueError(f"{self.name}: {start} does not accept {suffix_id}")

    def __repr__(self) -> str:
        return f"StateGraph({self.name!r}, states={list(self.states)})"


def _edges(state: str, *groups: Tuple[Tuple[str, ...], str]) -> Dict[Tuple[str, str], str]:
    """Expand (suffix ids, next state) groups into table entries."""
    return {
        (state, suffix_id): end
        for suffix_ids, end in groups
        for suffix_id in suffix_ids
    }


def _suffix_ids(table: Dict[Tuple[str, str], str], state: str) -> Tuple[str, ...]:
    return tuple(suffix_id for (start, suffix_id) in table if start == state)


def _build(name: str, suffixes: Tuple[Suffix, ...],
           flags: Dict[str, Tuple[bool, bool]],
           table: Dict[Tuple[str, str], str]) -> StateGraph:
    states = [
        State(state, initial, final, _suffix_ids(table, state))
        for state, (initial, final) in flags.items()
    ]
    return StateGraph(name, suffixes, states, table)


# ============================================================================
# Nominal Verb Machine
# ============================================================================

_NOMINAL_VERB_TABLE: Dict[Tuple[str, str], str] = {
    **_edges("A",
             (("S1", "S2", "S3", "S4"), "B"),
             (("S5",), "C"),
             (("S6", "S7", "S8", "S9"), "D"),
             (("S10",), "E"),
             (("S12", "S13", "S14", "S15"), "F"),
             (("S11",), "H")),
    **_edges("B", (("S14",), "F")),
    **_edges("C", (("S10", "S12", "S13", "S14"), "F")),
    **_edges("D", (("S12", "S13"), "F")),
    **_edges("E", (("S1", "S2", "S3", "S4", "S5"), "G"), (("S14",), "F")),
    **_edges("G", (("S14",), "F")),
    **_edges("H", (("S1", "S2", "S3", "S4", "S5"), "G"), (("S14",), "F")),
}

#                  initial final
NOMINAL_VERB_GRAPH = _build(NOMINAL_VERB, NOMINAL_VERB_SUFFIXES, {
    "A": (True, False),
    "B": (False, True),
    "C": (False, True),
    "D": (False, False),
    "E": (False, True),
    "F": (False, True),
    "G": (False, False),
    "H": (False, False),
}, _NOMINAL_VERB_TABLE)


# ============================================================================
# Noun Machine
# ============================================================================

_NOUN_TABLE: Dict[Tuple[str, str], str] = {
    **_edges("A",
             (("S8", "S11", "S13"), "B"),
             (("S9", "S16"), "C"),
             (("S18",), "D"),
             (("S10", "S17"), "E"),
             (("S12", "S14"), "F"),
             (("S15",), "G"),
             (("S2", "S3", "S4", "S5", "S6"), "H"),
             (("S7",), "K"),
             (("S1",), "L"),
             (("S19",), "M")),
    **_edges("B", (("S2", "S3", "S4", "S5"), "H"), (("S1",), "L")),
    **_edges("C", (("S6",), "H"), (("S7",), "K")),
    **_edges("D", (("S13",), "B"), (("S10",), "E"), (("S14",), "F")),
    **_edges("E",
             (("S18",), "D"),
             (("S2", "S3", "S4", "S5", "S6"), "H"),
             (("S7",), "K"),
             (("S1",), "L")),
    **_edges("F", (("S18",), "D"), (("S6",), "H"), (("S7",), "K")),
    **_edges("G",
             (("S18",), "D"),
             (("S2", "S3", "S4", "S5"), "H"),
             (("S1",), "L")),
    **_edges("H", (("S1",), "L")),
    **_edges("L", (("S18",), "D")),
    **_edges("M",
             (("S2", "S3", "S4", "S5", "S6"), "H"),
             (("S7",), "K"),
             (("S1",), "L")),
}

NOUN_GRAPH = _build(NOUN, NOUN_SUFFIXES, {
    "A": (True, True),
    "B": (False, True),
    "C": (False, False),
    "D": (False, False),
    "E": (False, True),
    "F": (False, False),
    "G": (False, True),
    "H": (False, True),
    "K": (False, True),
    "L": (False, True),
    "M": (False, True),
}, _NOUN_TABLE)


# ============================================================================
# Derivational Machine
# ============================================================================

DERIVATIONAL_GRAPH = _build(DERIVATIONAL, DERIVATIONAL_SUFFIXES, {
    "A": (True, False),
    "B": (False, True),
}, _edges("A", (("S1",), "B")))


GRAPHS: Dict[str, StateGraph] = {
    NOMINAL_VERB: NOMINAL_VERB_GRAPH,
    NOUN: NOUN_GRAPH,
    DERIVATIONAL: DERIVATIONAL_GRAPH,
}
