"""Error taxonomy for the rotor machine engine.

Every validation failure raised by the engine derives from EnigmaError, which
is itself a ValueError so callers that only care about "bad input" can catch
the builtin.
"""
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for all rotor machine errors."""


class InvalidAlphabet(EnigmaError):
    pass


class InvalidSymbol(EnigmaError):
    pass


class IndexOutOfRange(EnigmaError, IndexError):
    pass


class MalformedPermutation(EnigmaError):
    pass


class InvalidSetting(EnigmaError):
    pass


class InvalidSettingLength(EnigmaError):
    pass


class UnknownRotor(EnigmaError, LookupError):
    pass


class SlotCountMismatch(EnigmaError):
    pass


class InvalidRotorPlacement(EnigmaError):
    pass


class SlotUnconfigured(EnigmaError):
    pass


class ReflectorConstraintViolated(EnigmaError):
    pass
