import sys
from pathlib import Path

import pytest

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from enigmalab.machine.alphabet import DEFAULT_ALPHABET
from enigmalab.machine.components import Reflector, Rotor, RotorBank, build_plugboard
from enigmalab.machine.engine import Machine


@pytest.fixture
def fixture_machine() -> Machine:
    """Hand-wired machine: mirror plugboard, adjacent-pair reflector, one identity rotor."""
    size = len(DEFAULT_ALPHABET)
    reflector = Reflector([i ^ 1 for i in range(size)])
    rotors = RotorBank([Rotor(list(range(size)))])
    return Machine.from_components(build_plugboard(DEFAULT_ALPHABET), reflector, rotors)
