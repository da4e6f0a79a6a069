"""Seeding and run-directory helpers for evaluation runs."""
from __future__ import annotations

import json
import random
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np


def set_global_seed(seed: int) -> random.Random:
    """Seed the global generators and return a private one for setup draws."""
    random.seed(seed)
    np.random.seed(seed)
    return random.Random(seed)


def utc_timestamp() -> str:
    # 2026-10-19T08-15-00Z: no colons, usable in directory names
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%SZ")


@dataclass(frozen=True)
class RunPaths:
    run_dir: Path
    machines_json: Path
    report_json: Path
    summary_txt: Path


def make_run_dir(runs_root: str | Path, label: str) -> RunPaths:
    """Create RUNS_ROOT/<timestamp>_<label> and name the files written into it."""
    slug = re.sub(r"[^A-Za-z0-9_-]", "_", label.strip())[:60] or "run"
    run_dir = Path(runs_root) / f"{utc_timestamp()}_{slug}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return RunPaths(
        run_dir=run_dir,
        machines_json=run_dir / "machines.json",
        report_json=run_dir / "report.json",
        summary_txt=run_dir / "summary.txt",
    )


def _target(path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def write_json(path: str | Path, obj: Any) -> None:
    _target(path).write_text(json.dumps(obj, indent=2, sort_keys=True), encoding="utf-8")


def read_json(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def write_text(path: str | Path, text: str) -> None:
    _target(path).write_text(text.rstrip("\n") + "\n", encoding="utf-8")
