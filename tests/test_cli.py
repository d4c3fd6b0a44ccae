import logging

import pytest

from enigmalab import cli
from enigmalab.config import load_settings
from enigmalab.machine.builder import build_machine
from enigmalab.machine.spec import MachineSpec


def _answers(*items):
    it = iter(items)
    return lambda prompt: next(it)


def test_session_encrypts_then_decrypts(capsys):
    machine = build_machine(MachineSpec(num_rotors=4, seed=1))
    code = cli.run_session(machine, "Hello", read=_answers("maybe", "y"))
    out = capsys.readouterr().out
    assert code == 0
    assert "Invalid Entry" in out
    assert "Decryption Complete!" in out
    assert out.rstrip().endswith("Message currently is: Hello")


def test_session_declines_decrypt(capsys):
    machine = build_machine(MachineSpec(num_rotors=4, seed=1))
    code = cli.run_session(machine, "Hello", read=_answers("N"))
    out = capsys.readouterr().out
    assert code == 0
    assert "Goodbye" in out
    assert "Decrypting" not in out


def test_session_reports_unknown_symbol(capsys):
    machine = build_machine(MachineSpec(num_rotors=2, seed=1))
    code = cli.run_session(machine, "café", read=_answers("y"))
    assert code == 1
    assert "é" in capsys.readouterr().err


def test_progress_logger_reports_deciles(caplog):
    progress = cli.make_progress_logger("Encrypting")
    with caplog.at_level(logging.INFO, logger="enigmalab.cli"):
        for i in range(1, 21):
            progress(i, 20)
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Encrypting... 10% completed."
    assert messages[-1] == "Encrypting... 90% completed."
    assert len(messages) == 9


def test_main_with_message(monkeypatch, capsys):
    load_settings.cache_clear()
    monkeypatch.setattr("builtins.input", lambda prompt="": "y")
    code = cli.main(["--message", "Attack at dawn!", "--rotors", "3", "--seed", "5"])
    assert code == 0
    assert "Message currently is: Attack at dawn!" in capsys.readouterr().out


def _end_of_input(prompt):
    raise EOFError


def test_session_treats_end_of_input_as_no(capsys):
    machine = build_machine(MachineSpec(num_rotors=4, seed=1))
    code = cli.run_session(machine, "Hello", read=_end_of_input)
    out = capsys.readouterr().out
    assert code == 0
    assert "Goodbye" in out
    assert "Decrypting" not in out


def test_main_without_message_on_closed_stdin(monkeypatch, capsys):
    load_settings.cache_clear()
    monkeypatch.setattr("builtins.input", _end_of_input)
    code = cli.main(["--rotors", "2", "--seed", "5"])
    assert code == 1
    assert "No message given" in capsys.readouterr().err


@pytest.mark.parametrize("rotors", ["0", "501", "many"])
def test_main_rejects_bad_rotor_count(rotors, capsys):
    load_settings.cache_clear()
    with pytest.raises(SystemExit) as info:
        cli.main(["--message", "Hi", "--rotors", rotors])
    assert info.value.code == 2
    assert "--rotors" in capsys.readouterr().err
