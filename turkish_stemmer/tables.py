"""Suffix tables, state graphs and word lists loaded from YAML."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .config import StemmerConfig
from .errors import ConfigurationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuffixRule:
    id: str
    regex: str
    name: str = ""
    check_harmony: bool = True
    optional_letter: Optional[str] = None


@dataclass(frozen=True)
class StateNode:
    id: str
    final_state: bool = False
    transitions: tuple[tuple[str, str], ...] = ()

    @property
    def is_terminal(self) -> bool:
        """A state without outgoing transitions is terminal as well."""
        return self.final_state or not self.transitions


@dataclass(frozen=True)
class StateGraph:
    initial_state: Optional[str] = None
    states: Mapping[str, StateNode] = field(default_factory=dict)

    def __getitem__(self, state_id: str) -> StateNode:
        try:
            return self.states[state_id]
        except KeyError:
            raise ConfigurationError(f"State {state_id} does not exist") from None

    def __contains__(self, state_id: str) -> bool:
        return state_id in self.states

    def __len__(self) -> int:
        return len(self.states)


@dataclass(frozen=True)
class SuffixMachine:
    """The states and suffixes of one morphological category."""

    name: str
    states: StateGraph
    suffixes: Mapping[str, SuffixRule]


@dataclass(frozen=True)
class WordLists:
    protected_words: frozenset[str] = frozenset()
    vowel_harmony_exceptions: frozenset[str] = frozenset()
    last_consonant_exceptions: frozenset[str] = frozenset()
    selection_overrides: frozenset[str] = frozenset()


@dataclass(frozen=True)
class StemmerTables:
    nominal_verb: SuffixMachine
    noun: SuffixMachine
    derivational: SuffixMachine
    word_lists: WordLists

    @property
    def machines(self) -> tuple[SuffixMachine, SuffixMachine, SuffixMachine]:
        """The categories in the order words are stripped."""
        return (self.nominal_verb, self.noun, self.derivational)


def _load_yaml(path: Union[str, Path]) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"An error occurred loading {path}: {e}") from e


def parse_suffixes(raw: Optional[Mapping[str, Any]]) -> dict[str, SuffixRule]:
    suffixes = {}

    for suffix_id, record in (raw or {}).items():
        suffix_id = str(suffix_id)
        try:
            suffixes[suffix_id] = SuffixRule(
                id=suffix_id,
                regex=str(record["regex"]),
                name=str(record.get("name", "")),
                check_harmony=bool(record.get("check_harmony", True)),
                optional_letter=record.get("optional_letter") or None,
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ConfigurationError(f"Invalid suffix {suffix_id}: {e!r}") from e

    return suffixes


def parse_states(raw: Optional[Mapping[str, Any]]) -> StateGraph:
    if not raw:
        return StateGraph()

    states = {}
    try:
        initial_state = str(raw["initial_state"])

        for state_id, record in (raw.get("states") or {}).items():
            state_id = str(state_id)
            record = record or {}
            states[state_id] = StateNode(
                id=state_id,
                final_state=bool(record.get("final_state", False)),
                transitions=tuple(
                    (str(t["suffix"]), str(t["state"]))
                    for t in record.get("transitions") or ()
                ),
            )
    except (KeyError, TypeError, AttributeError) as e:
        raise ConfigurationError(f"Invalid state graph: {e!r}") from e

    return StateGraph(initial_state=initial_state, states=states)


def validate_machine(machine: SuffixMachine) -> None:
    """
    Raises:
        ConfigurationError: the initial state is missing, or a transition
            points to an unknown state or suffix
    """
    graph = machine.states
    if not graph:
        return

    if graph.initial_state not in graph:
        raise ConfigurationError(
            f"{machine.name}: initial state {graph.initial_state} does not exist"
        )

    for state in graph.states.values():
        for suffix_id, target in state.transitions:
            if target not in graph:
                raise ConfigurationError(
                    f"{machine.name}: state {state.id} transits to unknown state {target}"
                )
            if machine.suffixes and suffix_id not in machine.suffixes:
                raise ConfigurationError(
                    f"{machine.name}: state {state.id} uses unknown suffix {suffix_id}"
                )


def load_suffixes(path: Union[str, Path]) -> dict[str, SuffixRule]:
    return parse_suffixes(_load_yaml(path))


def load_states(path: Union[str, Path]) -> StateGraph:
    return parse_states(_load_yaml(path))


def load_machine(
    name: str, states_path: Union[str, Path], suffixes_path: Union[str, Path]
) -> SuffixMachine:
    machine = SuffixMachine(
        name=name,
        states=load_states(states_path),
        suffixes=load_suffixes(suffixes_path),
    )
    validate_machine(machine)

    logger.debug(
        "loaded %s machine: %d states, %d suffixes",
        name,
        len(machine.states),
        len(machine.suffixes),
    )
    return machine


def load_word_lists(path: Union[str, Path]) -> WordLists:
    raw = _load_yaml(path) or {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Please provide a valid word list file: {path}")

    return WordLists(
        **{
            key: frozenset(raw.get(key) or ())
            for key in (
                "protected_words",
                "vowel_harmony_exceptions",
                "last_consonant_exceptions",
                "selection_overrides",
            )
        }
    )


def load_tables(config: Optional[StemmerConfig] = None) -> StemmerTables:
    config = config or StemmerConfig()

    return StemmerTables(
        nominal_verb=load_machine(
            "nominal_verb",
            config.path(config.nominal_verb_states),
            config.path(config.nominal_verb_suffixes),
        ),
        noun=load_machine(
            "noun",
            config.path(config.noun_states),
            config.path(config.noun_suffixes),
        ),
        derivational=load_machine(
            "derivational",
            config.path(config.derivational_states),
            config.path(config.derivational_suffixes),
        ),
        word_lists=load_word_lists(config.path(config.word_lists)),
    )
