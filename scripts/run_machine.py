"""CLI entry point: encrypt or decrypt message files with a configured machine.

Usage:
    python scripts/run_machine.py default.conf                      # stdin -> stdout
    python scripts/run_machine.py default.conf input.in             # file -> stdout
    python scripts/run_machine.py default.conf input.in output.out  # file -> file
    python scripts/run_machine.py --verbose default.conf input.in   # trace each keypress

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.cipher.errors import EnigmaError
from rotorlab.config import load_settings
from rotorlab.io.config_parser import parse_config
from rotorlab.session import process_messages

logger = logging.getLogger("rotorlab.trace")


def _read(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        raise EnigmaError(f"could not open {path}") from None


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Rotor cipher machine simulator")
    parser.add_argument("config", help="Machine configuration file")
    parser.add_argument("input", nargs="?", default=None, help="Messages file (default: stdin)")
    parser.add_argument("output", nargs="?", default=None, help="Output file (default: stdout)")
    parser.add_argument(
        "--group", type=int, default=settings.group_size,
        help=f"Symbols per output group (default: {settings.group_size})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", default=settings.verbose,
        help="Log the rotor settings and signal path of every keypress",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        spec = parse_config(_read(args.config), name=Path(args.config).stem)
        text = _read(args.input) if args.input else sys.stdin.read()
        lines = process_messages(
            spec,
            text.splitlines(),
            group=args.group,
            trace=logger.debug if args.verbose else None,
        )
    except (EnigmaError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = "".join(line + "\n" for line in lines)
    if args.output:
        try:
            Path(args.output).write_text(result, encoding="utf-8")
        except OSError:
            print(f"Error: could not open {args.output}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
