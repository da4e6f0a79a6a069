"""Message-stream processing: setup lines followed by message lines.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from rotorlab.cipher.builder import apply_setup, build_machine
from rotorlab.cipher.machine import TraceFn
from rotorlab.cipher.spec import MachineSpec
from rotorlab.io.config_parser import ConfigFormatError, is_setup_line, parse_setup_line
from rotorlab.io.formatting import format_message

logger = logging.getLogger(__name__)


def process_messages(
    spec: MachineSpec,
    lines: Iterable[str],
    *,
    group: int = 5,
    trace: Optional[TraceFn] = None,
) -> List[str]:
    """Convert every message line of LINES, returning the formatted output lines.

    The first non-blank line must be a setup line. Each setup line reconfigures
    the machine for the message lines after it; spaces inside messages are
    ignored and symbols outside the alphabet are dropped.
    """
    machine = build_machine(spec, trace=trace)
    out: List[str] = []
    configured = False

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if is_setup_line(line):
            setup = parse_setup_line(line, machine.num_rotors())
            apply_setup(machine, setup)
            configured = True
            logger.debug("line %d: setup %s %s", lineno, " ".join(setup.rotors), setup.setting)
            continue
        if not configured:
            if not line.strip():
                continue
            raise ConfigFormatError(f"line {lineno}: message with no setup")
        out.append(format_message(machine.convert(line.replace(" ", "")), group))

    if not configured:
        raise ConfigFormatError("input contains no setup line")
    return out
