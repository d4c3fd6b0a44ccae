import random

import pytest

from enigmalab.machine.alphabet import DEFAULT_ALPHABET, UnknownSymbol
from enigmalab.machine.builder import build_machine
from enigmalab.machine.components import Reflector, Rotor, RotorBank, build_plugboard
from enigmalab.machine.engine import Machine
from enigmalab.machine.spec import MachineSpec
from enigmalab.machine.validator import validate_machine


def _machine(seed: int, rotors: int = 6) -> Machine:
    return build_machine(MachineSpec(num_rotors=rotors, seed=seed))


# ---------------------------------------------------------------------------
# Hand-wired fixture: exact expected outputs
# ---------------------------------------------------------------------------

def test_repeated_symbol_gives_different_outputs(fixture_machine):
    assert fixture_machine.process("AA") == "`B"


def test_fixture_decrypts_back(fixture_machine):
    fixture_machine.process("AA")
    fixture_machine.reset()
    assert fixture_machine.process("`B") == "AA"


def test_advance_happens_before_first_symbol(fixture_machine):
    fixture_machine.process_symbol("A")
    assert fixture_machine.rotors[0].offset == 1


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def test_process_before_initialize_fails():
    machine = Machine(num_rotors=3)
    assert not machine.is_initialized
    with pytest.raises(RuntimeError):
        machine.process("abc")
    with pytest.raises(RuntimeError):
        machine.reset()


def test_initialize_builds_valid_machine():
    machine = Machine(num_rotors=5, rng=random.Random(4))
    machine.initialize()
    ok, errs = validate_machine(machine)
    assert ok, errs
    assert len(machine.rotors) == 5


def test_initialize_twice_keeps_wiring():
    machine = Machine(num_rotors=3, rng=random.Random(4))
    machine.initialize()
    before = machine.rotors.snapshot()
    machine.initialize()
    assert machine.rotors.snapshot() == before


def test_default_machine_has_fifty_rotors():
    machine = build_machine(MachineSpec(seed=1))
    assert len(machine.rotors) == 50
    assert validate_machine(machine) == (True, [])


def test_same_seed_same_ciphertext():
    assert _machine(77).process("Hello, World!") == _machine(77).process("Hello, World!")


def test_different_seed_different_ciphertext():
    assert _machine(1).process("Hello, World!") != _machine(2).process("Hello, World!")


def test_reset_is_idempotent():
    machine = _machine(9)
    first = machine.process("The quick brown fox")
    machine.reset()
    machine.reset()
    assert machine.rotors.is_at_start()
    assert machine.process("The quick brown fox") == first


def test_process_without_reset_continues_stepping():
    machine = _machine(10)
    a = machine.process("same text")
    b = machine.process("same text")
    assert a != b


def test_from_components_rejects_size_mismatch():
    with pytest.raises(ValueError):
        Machine.from_components(
            build_plugboard(DEFAULT_ALPHABET),
            Reflector([1, 0]),
            RotorBank([Rotor(list(range(len(DEFAULT_ALPHABET))))]),
        )


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_unknown_symbol_is_rejected():
    machine = _machine(3)
    with pytest.raises(UnknownSymbol) as info:
        machine.process("café")
    assert info.value.symbol == "é"
    assert info.value.position == 3


def test_unknown_symbol_leaves_rotors_advanced_through_failure():
    machine = _machine(3)
    with pytest.raises(UnknownSymbol):
        machine.process("café")
    assert machine.rotors[0].offset == 4
    machine.reset()
    assert machine.rotors.is_at_start()


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("seed", [0, 5, 1337])
def test_no_symbol_encrypts_to_itself(seed):
    machine = _machine(seed)
    text = DEFAULT_ALPHABET.symbols * 3
    out = machine.process(text)
    assert all(p != c for p, c in zip(text, out))


def test_output_stays_in_alphabet_and_keeps_length():
    machine = _machine(12)
    text = "Hello World! 1234 {x|y} \"quoted\" 'single' `tick`"
    out = machine.process(text)
    assert len(out) == len(text)
    assert all(ch in DEFAULT_ALPHABET for ch in out)


def test_progress_callback_reports_every_symbol():
    machine = _machine(6)
    calls = []
    machine.process("abcde", progress_callback=lambda cur, total: calls.append((cur, total)))
    assert calls == [(1, 5), (2, 5), (3, 5), (4, 5), (5, 5)]


def test_empty_message():
    machine = _machine(6)
    assert machine.process("") == ""
    assert machine.rotors.is_at_start()


def test_describe():
    machine = _machine(6, rotors=4)
    info = machine.describe()
    assert info["num_rotors"] == 4
    assert info["alphabet_size"] == 94
    assert info["at_start"] is True
    machine.process("x")
    assert machine.describe()["rotor_offset"] == 1


def test_machine_spec_validation():
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        MachineSpec(num_rotors=0)
    with pytest.raises(ValidationError):
        MachineSpec(name="   ")


def test_machine_spec_fields():
    assert set(MachineSpec.model_fields) == {"name", "num_rotors", "seed"}
