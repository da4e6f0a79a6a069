from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


RotorKindName = Literal["reflector", "fixed", "moving"]


class RotorSpec(BaseModel):
    """Declarative description of one rotor in a machine's catalog."""

    name: str = Field(..., min_length=1, max_length=40)
    kind: RotorKindName
    notches: str = Field(default="", description="Notch symbols; moving rotors only")
    cycles: str = Field(default="", description="Permutation in cycle notation")

    @field_validator("kind", mode="before")
    @classmethod
    def _lower_kind(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError("rotor name must not contain whitespace")
        return v

    @model_validator(mode="after")
    def _notches_only_for_moving(self) -> "RotorSpec":
        if self.notches and self.kind != "moving":
            raise ValueError(f"rotor {self.name}: only moving rotors have notches")
        return self


class MachineSpec(BaseModel):
    """A rotor machine: its alphabet, slot and pawl counts, and rotor catalog.

    This is a simulation of a historical device, not a security primitive.
    """

    name: str = Field(default="machine", min_length=1, max_length=80)
    alphabet: str = Field(..., min_length=1)
    num_rotors: int = Field(..., ge=2, description="Slots including the reflector")
    num_pawls: int = Field(..., ge=0, description="Rightmost slots that can rotate")
    rotors: List[RotorSpec] = Field(default_factory=list)
    notes: str = Field(default="")

    @model_validator(mode="after")
    def _counts(self) -> "MachineSpec":
        if self.num_pawls >= self.num_rotors:
            raise ValueError("num_pawls must be smaller than num_rotors")
        names = [r.name for r in self.rotors]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"duplicate rotor names: {', '.join(dupes)}")
        return self

    def rotor(self, name: str) -> RotorSpec:
        for r in self.rotors:
            if r.name == name:
                return r
        raise KeyError(f"Unknown rotor: {name}")


class SetupSpec(BaseModel):
    """Rotor selection, initial setting and plugboard for one message block."""

    rotors: List[str] = Field(..., min_length=2)
    setting: str = Field(..., min_length=1)
    plugboard: str = Field(default="")
