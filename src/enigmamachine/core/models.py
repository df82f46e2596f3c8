from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EnigmaSettings:
    # Slots are (left, middle, right); indices into the rotor catalog, 1-based
    rotor_order: tuple[int, int, int]
    key: str
    ring: str = "AAA"

    # Full 26-letter wiring, already resolved from "A"/"B"/"C" if a name was given
    reflector: str = "YRUHQSLDPXNGOKMIEBFZCWVJAT"

    plugboard: tuple[tuple[str, str], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "rotor_order": list(self.rotor_order),
            "key": self.key,
            "ring": self.ring,
            "reflector": self.reflector,
            "plugboard": ["".join(p) for p in self.plugboard],
        }


@dataclass
class MachineState:
    """
    Per-message rotor state.

    Movement counters only ever grow and are read modulo 26 by the signal path.
    Notch counters count keystrokes left until that rotor turns over the next
    one; they stay in 1..26.
    """

    left_movements: int
    middle_movements: int
    right_movements: int

    left_notch: int
    middle_notch: int
    right_notch: int

    steps: int = field(default=0)

    @property
    def movements(self) -> tuple[int, int, int]:
        return (self.left_movements, self.middle_movements, self.right_movements)

    @property
    def notches(self) -> tuple[int, int, int]:
        return (self.left_notch, self.middle_notch, self.right_notch)

    def to_dict(self) -> dict[str, Any]:
        return {
            "movements": list(self.movements),
            "notches": list(self.notches),
            "steps": self.steps,
        }
