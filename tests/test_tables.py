import pytest
from turkish_stemmer import tables as tables_module
from turkish_stemmer.config import DATA_DIR_ENV, PACKAGE_DATA_DIR, StemmerConfig
from turkish_stemmer.errors import ConfigurationError
from turkish_stemmer.tables import (
    SuffixMachine,
    load_states,
    load_tables,
    load_word_lists,
    parse_states,
    parse_suffixes,
    validate_machine,
)


def test_packaged_tables_load():
    tables = load_tables()

    assert [m.name for m in tables.machines] == ["nominal_verb", "noun", "derivational"]
    for machine in tables.machines:
        assert machine.states.initial_state == "a"
        assert not machine.states["a"].final_state

    assert len(tables.nominal_verb.suffixes) == 15
    assert len(tables.noun.suffixes) == 19
    assert len(tables.derivational.suffixes) == 1


def test_packaged_suffix_rules():
    tables = load_tables()

    ki = tables.noun.suffixes["s18"]
    assert ki.regex == "ki"
    assert ki.check_harmony is False
    assert ki.optional_letter is None

    assert tables.nominal_verb.suffixes["s14"].optional_letter == "y"


def test_packaged_word_lists():
    word_lists = load_tables().word_lists

    assert "soyad" in word_lists.protected_words
    assert "ad" in word_lists.last_consonant_exceptions
    assert "saatler" in word_lists.vowel_harmony_exceptions
    assert "ev" in word_lists.selection_overrides


def test_state_without_transitions_is_terminal():
    graph = parse_states(
        {
            "initial_state": "a",
            "states": {
                "a": {"transitions": [{"suffix": "s1", "state": "b"}]},
                "b": {},
            },
        }
    )

    assert not graph["a"].is_terminal
    assert graph["b"].is_terminal
    assert graph["a"].transitions == (("s1", "b"),)


def test_unknown_target_state_is_rejected():
    machine = SuffixMachine(
        name="broken",
        states=parse_states(
            {
                "initial_state": "a",
                "states": {"a": {"transitions": [{"suffix": "s1", "state": "z"}]}},
            }
        ),
        suffixes=parse_suffixes({"s1": {"regex": "lar"}}),
    )

    with pytest.raises(ConfigurationError, match="unknown state z"):
        validate_machine(machine)


def test_unknown_suffix_is_rejected():
    machine = SuffixMachine(
        name="broken",
        states=parse_states(
            {
                "initial_state": "a",
                "states": {
                    "a": {"transitions": [{"suffix": "s9", "state": "b"}]},
                    "b": {"final_state": True},
                },
            }
        ),
        suffixes=parse_suffixes({"s1": {"regex": "lar"}}),
    )

    with pytest.raises(ConfigurationError, match="unknown suffix s9"):
        validate_machine(machine)


def test_missing_initial_state_is_rejected():
    machine = SuffixMachine(
        name="broken",
        states=parse_states({"initial_state": "x", "states": {"a": {}}}),
        suffixes={},
    )

    with pytest.raises(ConfigurationError, match="initial state x"):
        validate_machine(machine)


def test_suffix_without_regex_is_rejected():
    with pytest.raises(ConfigurationError):
        parse_suffixes({"s1": {"name": "-lAr"}})


def test_missing_file_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_word_lists(tmp_path / "missing.yml")


def test_malformed_yaml_is_a_configuration_error(tmp_path):
    path = tmp_path / "states.yml"
    path.write_text("initial_state: [a\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_states(path)


def test_empty_file_gives_empty_graph(tmp_path):
    path = tmp_path / "states.yml"
    path.write_text("", encoding="utf-8")

    assert len(load_states(path)) == 0


def test_load_tables_fails_on_broken_graph(tmp_path):
    for source in PACKAGE_DATA_DIR.glob("*.yml"):
        (tmp_path / source.name).write_text(
            source.read_text(encoding="utf-8"), encoding="utf-8"
        )

    (tmp_path / "derivational_states.yml").write_text(
        "initial_state: a\n"
        "states:\n"
        "  a:\n"
        "    transitions:\n"
        "      - suffix: s1\n"
        "        state: q\n",
        encoding="utf-8",
    )

    with pytest.raises(ConfigurationError, match="derivational"):
        load_tables(StemmerConfig(data_dir=str(tmp_path)))


def test_data_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))

    assert StemmerConfig().data_dir == tmp_path
    assert StemmerConfig(data_dir="elsewhere").path("noun_states.yml").parts == (
        "elsewhere",
        "noun_states.yml",
    )


def test_default_data_dir(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)

    assert StemmerConfig().data_dir == PACKAGE_DATA_DIR
    assert tables_module.load_tables().noun.states.initial_state == "a"
