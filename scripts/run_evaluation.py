"""CLI entry point for evaluating machine templates or configuration files.

Usage:
    python scripts/run_evaluation.py                                 # all templates
    python scripts/run_evaluation.py --templates ENIGMA_I            # subset
    python scripts/run_evaluation.py --config default.conf           # a configuration file
    python scripts/run_evaluation.py --messages 50 --skip-period     # quick run

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

from rotorlab.cipher.errors import EnigmaError
from rotorlab.cipher.rotors_builtin import get_template, list_templates
from rotorlab.cipher.validator import validate_spec
from rotorlab.config import load_settings
from rotorlab.evaluation import (
    EvaluationReport,
    ciphertext_statistics,
    measure_period,
    random_setup,
    run_roundtrip_tests,
)
from rotorlab.io.config_parser import parse_config
from rotorlab.utils.repro import make_run_dir, set_global_seed, write_json, write_text

logger = logging.getLogger(__name__)

SAMPLE_TEXT = (
    "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOGWHILETHEOPERATORSETSTHEROTORS"
    "ANDCHECKSTHATEVERYMESSAGEDECRYPTSBACKTOTHESAMEPLAINTEXTEVERYTIME"
)


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Rotor machine evaluation")
    parser.add_argument(
        "--templates", nargs="+", default=None,
        help=f"Templates to evaluate (default: all of {', '.join(list_templates())})",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Evaluate a machine configuration file instead of templates",
    )
    parser.add_argument(
        "--messages", type=int, default=settings.roundtrip_messages,
        help=f"Roundtrip messages per machine (default: {settings.roundtrip_messages})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Random seed (default: {settings.global_seed})",
    )
    parser.add_argument(
        "--output-dir", type=str, default=settings.runs_dir,
        help=f"Output directory (default: {settings.runs_dir})",
    )
    parser.add_argument("--skip-period", action="store_true", help="Skip period measurement")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    rng = set_global_seed(args.seed)

    try:
        if args.config:
            specs = [parse_config(Path(args.config).read_text(encoding="utf-8"), name=Path(args.config).stem)]
        else:
            specs = [get_template(name) for name in (args.templates or list_templates())]
    except (EnigmaError, KeyError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    report = EvaluationReport()
    for spec in specs:
        ok, errs = validate_spec(spec)
        if not ok:
            for e in errs:
                logger.error("%s: %s", spec.name, e)
            continue

        logger.info("Evaluating %s", spec.name)
        report.roundtrip_results.append(run_roundtrip_tests(
            spec,
            num_messages=args.messages,
            message_length=settings.roundtrip_message_length,
            seed=args.seed,
        ))
        setup = random_setup(spec, rng)
        if not args.skip_period:
            report.period_results.append(measure_period(spec, setup, limit=settings.period_limit))
        report.statistics_results.append(ciphertext_statistics(spec, setup, SAMPLE_TEXT * 4))

    paths = make_run_dir(args.output_dir, "evaluation")
    write_json(paths.machines_json, [s.model_dump() for s in specs])
    write_json(paths.report_json, report.to_dict())
    write_text(paths.summary_txt, report.to_summary())

    print(report.to_summary())
    print(f"\nAll results saved to: {paths.run_dir}")
    return 0 if not report.failing_machines() else 2


if __name__ == "__main__":
    sys.exit(main())
