from __future__ import annotations

import json
import random
import time
from pathlib import Path
from typing import Any, Optional


def build_rng(seed: Optional[int]) -> random.Random:
    """Deterministic source when *seed* is given, else seeded from OS entropy."""
    return random.Random(seed) if seed is not None else random.Random()


def utc_timestamp() -> str:
    # e.g. 2026-01-08T12-34-56Z (safe for filenames)
    return time.strftime("%Y-%m-%dT%H-%M-%SZ", time.gmtime())


def make_run_dir(runs_root: str | Path, run_name: str) -> Path:
    runs_root = Path(runs_root)
    safe = "".join(ch if ch.isalnum() or ch in {"-", "_"} else "_" for ch in run_name.strip())[:60]
    run_dir = runs_root / f"{utc_timestamp()}_{safe}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def write_json(path: str | Path, obj: Any) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True), encoding="utf-8")
