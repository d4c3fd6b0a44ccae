"""enigmalab: a 94-symbol, many-rotor Enigma-style cipher machine.

Research / education only. Do NOT use in production.
"""

__version__ = "0.1.0"
