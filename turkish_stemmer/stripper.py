"""Suffix stripping machine for one morphological category."""

import logging
from collections import deque
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from line_profiler import profile

from .errors import ConfigurationError
from .tables import StateGraph, SuffixMachine, WordLists
from .transition import mark_stem


logger = logging.getLogger(__name__)


@dataclass
class PendingTransition:
    suffix: str
    to_state: str
    from_state: str
    word: str
    rollback: Optional[str] = None
    mark: bool = False

    def is_like(self, other: "PendingTransition") -> bool:
        return self.from_state == other.from_state and self.to_state == other.to_state


def generate_pendings(
    state_id: str,
    word: str,
    states: StateGraph,
    rollback: Optional[str] = None,
    mark: bool = False,
) -> list[PendingTransition]:
    """
    Build a pending transition for every transition leaving state_id.

    When no rollback is passed and the state is terminal, word itself becomes
    the rollback of the new pendings.

    Raises:
        ConfigurationError: state_id is not part of the graph
    """
    state = states[state_id]
    if rollback is None and state.final_state:
        rollback = word

    return [
        PendingTransition(
            suffix=suffix,
            to_state=to_state,
            from_state=state_id,
            word=word,
            rollback=rollback,
            mark=mark,
        )
        for suffix, to_state in state.transitions
    ]


def similar_pendings(
    pending: PendingTransition, pendings: Iterable[PendingTransition]
) -> list[PendingTransition]:
    return [candidate for candidate in pendings if candidate.is_like(pending)]


def remove_pendings_like(pending: PendingTransition, pendings: deque) -> deque:
    return deque(candidate for candidate in pendings if not candidate.is_like(pending))


def remove_mark_pendings(pendings: deque) -> deque:
    return deque(candidate for candidate in pendings if not candidate.mark)


def mark_pendings(pending: PendingTransition, pendings: Iterable[PendingTransition]):
    for candidate in similar_pendings(pending, pendings):
        candidate.mark = True


@profile
def affix_morphological_stripper(
    word: str,
    machine: SuffixMachine,
    word_lists: WordLists = WordLists(),
    tracer: Optional[logging.Logger] = None,
) -> list[str]:
    """
    Strip suffixes from word following the states and suffixes of machine.

    Returns every stem found, without duplicates and in discovery order, or
    [word] when nothing could be stripped.

    Raises:
        ConfigurationError: a transition points to a state missing from the graph
    """
    tracer = tracer or logger
    states, suffixes = machine.states, machine.suffixes

    if not states or not suffixes:
        return [word]

    stems = []
    # the input word itself is never a rollback
    pendings = deque(
        replace(pending, rollback=None)
        for pending in generate_pendings(states.initial_state, word, states)
    )

    while pendings:
        pending = pendings.popleft()
        to_state = states[pending.to_state]
        if (rule := suffixes.get(pending.suffix)) is None:
            raise ConfigurationError(f"Suffix {pending.suffix} does not exist")

        answer = mark_stem(pending.word, rule, word_lists)

        if answer.matched:
            tracer.debug(
                "%s: %s -[%s]-> %s: %s -> %s",
                machine.name,
                pending.from_state,
                answer.suffix_applied,
                pending.to_state,
                pending.word,
                answer.word,
            )

            if to_state.is_terminal:
                # the transition is confirmed, alternative suffixes for the
                # same edge and speculative deeper paths are dropped
                pendings = remove_pendings_like(pending, pendings)
                pendings = remove_mark_pendings(pendings)

                stems.append(answer.word)
                if to_state.transitions:
                    pendings.extendleft(
                        reversed(generate_pendings(to_state.id, answer.word, states))
                    )
            else:
                mark_pendings(pending, pendings)
                pendings.extendleft(
                    reversed(
                        generate_pendings(
                            to_state.id,
                            answer.word,
                            states,
                            rollback=pending.rollback,
                            mark=True,
                        )
                    )
                )

        elif pending.rollback and not similar_pendings(pending, pendings):
            tracer.debug(
                "%s: dead end at %s, rolling back to %s",
                machine.name,
                pending.from_state,
                pending.rollback,
            )
            stems.append(pending.rollback)

    if not stems:
        return [word]

    return list(dict.fromkeys(stems))
