"""Readers for the plain-text machine configuration and setup lines.

A configuration looks like::

    ABCDEFGHIJKLMNOPQRSTUVWXYZ
    5 3
    I MQ      (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
    Beta N    (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
    B R       (AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP)
              (RX) (SZ) (TV)

i.e. the alphabet, the number of slots, the number of pawls, then one
description per rotor: its name, its type (``M`` followed by the notches,
``N`` for a fixed rotor, ``R`` for a reflector) and its cycles, which may run
onto following lines.

A setup line selects the rotors for the messages that follow it::

    * B Beta III IV I AXLE (HQ) (EX) (IP) (TR) (BY)
"""
from __future__ import annotations

from typing import List

from pydantic import ValidationError

from rotorlab.cipher.errors import EnigmaError
from rotorlab.cipher.spec import MachineSpec, RotorSpec, SetupSpec

_RESERVED = ("*", "(", ")")


class ConfigFormatError(EnigmaError):
    pass


def _is_cycle_token(tok: str) -> bool:
    return tok.startswith("(")


def _parse_int(tok: str, what: str) -> int:
    try:
        return int(tok)
    except ValueError:
        raise ConfigFormatError(f"Expected {what}, found {tok!r}") from None


def _parse_rotor(name: str, kind_tok: str, cycles: List[str]) -> RotorSpec:
    code, rest = kind_tok[0], kind_tok[1:]
    if code == "M":
        kind, notches = "moving", rest
    elif code == "N" and not rest:
        kind, notches = "fixed", ""
    elif code == "R" and not rest:
        kind, notches = "reflector", ""
    else:
        raise ConfigFormatError(f"bad rotor description: {name} {kind_tok}")
    try:
        return RotorSpec(name=name, kind=kind, notches=notches, cycles=" ".join(cycles))
    except ValidationError as exc:
        raise ConfigFormatError(f"bad rotor description: {name}: {exc}") from exc


def parse_config(text: str, *, name: str = "machine") -> MachineSpec:
    """Parse a configuration file's contents into a MachineSpec."""
    tokens = text.split()
    if len(tokens) < 3:
        raise ConfigFormatError("configuration file truncated")

    alphabet = tokens[0]
    if any(ch in alphabet for ch in _RESERVED):
        raise ConfigFormatError(f"Reserved character in alphabet {alphabet!r}")
    num_rotors = _parse_int(tokens[1], "number of rotors")
    num_pawls = _parse_int(tokens[2], "number of pawls")

    rotors: List[RotorSpec] = []
    i = 3
    while i < len(tokens):
        rotor_name = tokens[i]
        if _is_cycle_token(rotor_name):
            raise ConfigFormatError(f"Cycles {rotor_name!r} do not follow a rotor description")
        if i + 1 >= len(tokens):
            raise ConfigFormatError(f"bad rotor description: {rotor_name}")
        kind_tok = tokens[i + 1]
        i += 2
        cycles: List[str] = []
        while i < len(tokens) and _is_cycle_token(tokens[i]):
            cycles.append(tokens[i])
            i += 1
        rotors.append(_parse_rotor(rotor_name, kind_tok, cycles))

    try:
        return MachineSpec(
            name=name,
            alphabet=alphabet,
            num_rotors=num_rotors,
            num_pawls=num_pawls,
            rotors=rotors,
        )
    except ValidationError as exc:
        raise ConfigFormatError(f"invalid machine description: {exc}") from exc


def is_setup_line(line: str) -> bool:
    return line.lstrip().startswith("*")


def parse_setup_line(line: str, num_rotors: int) -> SetupSpec:
    """Parse ``* ROTOR... SETTING [CYCLES...]`` for a machine with NUM_ROTORS slots."""
    if not is_setup_line(line):
        raise ConfigFormatError(f"Setup line must start with '*': {line!r}")
    fields = line.lstrip()[1:].split()
    if len(fields) < num_rotors + 1:
        raise ConfigFormatError(
            f"Setup needs {num_rotors} rotor names and a setting: {line.strip()!r}"
        )
    return SetupSpec(
        rotors=fields[:num_rotors],
        setting=fields[num_rotors],
        plugboard=" ".join(fields[num_rotors + 1:]),
    )
