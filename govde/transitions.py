"""
Transition walk over a suffix stripping machine.

The walk explores every suffix removal path of a word breadth first. Each
pending step is a Transition. When a step lands on a final state, pending
siblings that would reach the same state the same way, and any step already
known to be redundant (marked), are dropped. When a step lands on a
non-final state its siblings are only marked, and the new steps remember the
last final word of the path (the rollback word) so that it can be recovered
if the path dies before reaching another final state.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable, List, Optional

from govde.states import State, StateGraph
from govde.suffixes import Suffix

logger = logging.getLogger(__name__)

# (word, suffix) -> stripped word, or the word itself when nothing was stripped
StripFunction = Callable[[str, Suffix], str]


@dataclass(eq=False)
class Transition:
    """
    A pending suffix removal step.

    Attributes:
        start_state: State the word is in.
        next_state: State reached once the suffix is removed.
        word: Word to strip.
        suffix: Suffix to remove.
        rollback_word: Last final word seen on this path, if any.
        marked: Whether a sibling already took the same step.
    """
    start_state: State
    next_state: State
    word: str
    suffix: Suffix
    rollback_word: Optional[str] = None
    marked: bool = False

    def is_similar(self, other: "Transition") -> bool:
        """Check if both transitions join the same pair of states."""
        return (self.start_state == other.start_state
                and self.next_state == other.next_state)

    def similar_transitions(self, transitions: Iterable["Transition"]) -> List["Transition"]:
        """Get the transitions joining the same pair of states as this one."""
        return [t for t in transitions if self.is_similar(t)]

    def __str__(self) -> str:
        return (f"{self.start_state}({self.suffix}) -> {self.next_state} "
                f"(rollback: {self.rollback_word})")


def add_transitions(graph: StateGraph, state: State, word: str,
                    rollback_word: Optional[str] = None,
                    marked: bool = False) -> List[Transition]:
    """
    Get the transitions leaving `state` whose suffix matches `word`.

    Args:
        graph: Machine owning the state.
        state: State the word is in.
        word: Word to match suffixes against.
        rollback_word: Rollback word carried by the new transitions.
        marked: Initial marked flag of the new transitions.

    Returns:
        New transitions in suffix priority order.
    """
    transitions = []
    for suffix in graph.suffixes_of(state):
        if suffix.matches(word):
            transitions.append(Transition(
                state, graph.next_state(state, suffix), word, suffix,
                rollback_word, marked,
            ))
    return transitions


def walk(graph: StateGraph, word: str, strip: StripFunction) -> List[str]:
    """
    Collect the stems reachable from a word through a machine.

    Args:
        graph: Machine to walk.
        word: Word to stem.
        strip: Suffix application policy; must return the word unchanged
            when the suffix cannot be removed.

    Returns:
        Distinct candidate stems in the order they were found. Empty when
        no suffix of the machine could be removed.
    """
    stems: List[str] = []

    def add_stem(stem: str) -> None:
        if stem not in stems:
            stems.append(stem)

    pending: Deque[Transition] = deque(
        add_transitions(graph, graph.initial_state, word))

    while pending:
        transition = pending.popleft()
        stem = strip(transition.word, transition.suffix)
        logger.debug(f"[{graph.name}] {transition}: '{transition.word}' -> '{stem}'")

        if stem != transition.word:
            if transition.next_state.final:
                pending = deque(
                    t for t in pending
                    if not (transition.is_similar(t) or t.marked)
                )
                add_stem(stem)
                pending.extend(add_transitions(graph, transition.next_state, stem))
            else:
                for similar in transition.similar_transitions(pending):
                    similar.marked = True
                rollback_word = transition.rollback_word
                if rollback_word is None and transition.start_state.final:
                    rollback_word = transition.word
                pending.extend(add_transitions(
                    graph, transition.next_state, stem, rollback_word, marked=True))
        elif (transition.rollback_word is not None
              and not transition.similar_transitions(pending)):
            logger.debug(f"[{graph.name}] roll back to '{transition.rollback_word}'")
            add_stem(transition.rollback_word)

    return stems
