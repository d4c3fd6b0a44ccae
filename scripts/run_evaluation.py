"""CLI entry point for machine evaluation.

Usage:
    python scripts/run_evaluation.py                               # settings defaults
    python scripts/run_evaluation.py --rotors 10 --vectors 50      # quick run
    python scripts/run_evaluation.py --seeds 1 2 3 --output-dir runs

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from enigmalab.config import load_settings
from enigmalab.evaluation.runner import evaluate_machine
from enigmalab.machine.spec import MachineSpec
from enigmalab.utils.repro import make_run_dir, write_json


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def main() -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Evaluate rotor machine sessions: structure, reciprocity, stepping, frequency",
    )
    parser.add_argument(
        "--rotors", type=int, default=settings.num_rotors,
        help=f"Rotors per machine (default: {settings.num_rotors})",
    )
    parser.add_argument(
        "--seeds", type=int, nargs="+", default=None,
        help="Machine seeds to evaluate (default: settings seed or 1337)",
    )
    parser.add_argument(
        "--vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Reciprocity messages per machine (default: {settings.roundtrip_vectors})",
    )
    parser.add_argument(
        "--length", type=int, default=settings.message_length,
        help=f"Symbols per reciprocity message (default: {settings.message_length})",
    )
    parser.add_argument(
        "--output-dir", type=str, default=settings.runs_dir,
        help=f"Directory for JSON reports (default: {settings.runs_dir})",
    )
    parser.add_argument(
        "--no-write", action="store_true",
        help="Print summaries only, write no files",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    seeds = args.seeds or [settings.seed if settings.seed is not None else 1337]

    failures = 0
    for seed in seeds:
        spec = MachineSpec(name=f"enigma-94-r{args.rotors}-s{seed}", num_rotors=args.rotors, seed=seed)
        print(f"Evaluating {spec.name}...")
        report = evaluate_machine(
            spec,
            num_vectors=args.vectors,
            message_length=args.length,
            seed=seed,
            progress_callback=_cli_progress,
        )
        print(report.to_summary())
        print()

        if not report.all_pass:
            failures += 1

        if not args.no_write:
            run_dir = make_run_dir(args.output_dir, spec.name)
            write_json(run_dir / "report.json", report.to_dict())
            write_json(run_dir / "machine_spec.json", spec.model_dump())
            print(f"Wrote {run_dir / 'report.json'}")

    print(f"\n{len(seeds) - failures}/{len(seeds)} machines passed.")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
