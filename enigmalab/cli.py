"""Interactive rotor machine session.

Usage:
    enigmalab                          # prompt for a message
    enigmalab --message "Hello"        # encrypt a given message
    enigmalab --rotors 10 --seed 42    # smaller, reproducible machine

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from enigmalab.config import load_settings
from enigmalab.machine.alphabet import UnknownSymbol
from enigmalab.machine.builder import build_machine
from enigmalab.machine.engine import Machine
from enigmalab.machine.spec import MachineSpec

logger = logging.getLogger("enigmalab.cli")


def make_progress_logger(label: str) -> Callable[[int, int], None]:
    """Log once per completed tenth of the message."""
    reported = {"decile": 0}

    def _progress(current: int, total: int) -> None:
        if total <= 0:
            return
        decile = (current * 10) // total
        while reported["decile"] < min(decile, 9):
            reported["decile"] += 1
            logger.info("%s... %d%% completed.", label, reported["decile"] * 10)

    return _progress


def ask_yes_no(prompt: str, read: Optional[Callable[[str], str]] = None) -> bool:
    read = read or input
    while True:
        try:
            ans = read(prompt).strip()
        except EOFError:
            print()
            return False
        if ans[:1] in {"y", "Y"}:
            return True
        if ans[:1] in {"n", "N"}:
            return False
        print("\nInvalid Entry. Please enter either Y or N.\n")


def run_session(
    machine: Machine,
    message: str,
    *,
    read: Optional[Callable[[str], str]] = None,
) -> int:
    """Encrypt ``message``, then optionally reset and decrypt. Returns an exit code."""
    print("Encrypting...")
    try:
        cipher = machine.process(message, progress_callback=make_progress_logger("Encrypting"))
    except UnknownSymbol as exc:
        print(f"Cannot encrypt: {exc}", file=sys.stderr)
        return 1
    print("Encryption Complete!\n")
    print(f"Message currently is: {cipher}\n")

    if ask_yes_no(
        "Do you want to decrypt the message (using the original plugboard, rotor, "
        "and reflector settings)? (Y/N): ",
        read,
    ):
        machine.reset()
        print("Decrypting...")
        plain = machine.process(cipher, progress_callback=make_progress_logger("Decrypting"))
        print("Decryption Complete!\n")
        print(f"Message currently is: {plain}\n")
    else:
        print("\nOkay. Goodbye!\n")
    return 0


MIN_ROTORS, MAX_ROTORS = 1, 500


def _rotor_count(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if not MIN_ROTORS <= n <= MAX_ROTORS:
        raise argparse.ArgumentTypeError(f"must be between {MIN_ROTORS} and {MAX_ROTORS}, got {n}")
    return n


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = load_settings()
    p = argparse.ArgumentParser(description="Encrypt and decrypt with a 94-symbol rotor machine.")
    p.add_argument("-m", "--message", metavar="TEXT", help="Message to encrypt. Prompted for if omitted.")
    p.add_argument("--rotors", type=_rotor_count, default=settings.num_rotors,
                   help=f"Number of rotors (default: {settings.num_rotors})")
    p.add_argument("--seed", type=int, default=settings.seed,
                   help="Seed for the random wiring (default: fresh each run)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print("Welcome to the enigmalab rotor machine.")
    print("This machine will initialize itself, encrypt a message, and decrypt it if so desired.")

    spec = MachineSpec(num_rotors=args.rotors, seed=args.seed)
    machine = build_machine(spec)

    if args.message is not None:
        message = args.message
    else:
        try:
            message = input("Enter your desired message: ")
        except EOFError:
            print("\nNo message given.", file=sys.stderr)
            return 1
    return run_session(machine, message)


if __name__ == "__main__":
    sys.exit(main())
