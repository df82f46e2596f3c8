from __future__ import annotations

from dataclasses import dataclass

from enigmamachine.core.mapping import Mapping

# Army Enigma I/M3 wheels I-V. Notch is 1-indexed from 'A': the rotor turns
# its left neighbour over when it steps past that letter (I: Q->R, II: E->F, ...).
_ROTOR_TABLE: tuple[tuple[str, int], ...] = (
    ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", 17),
    ("AJDKSIRUXBLHWTMCQGZNPYFVOE", 5),
    ("BDFHJLCPRTXVZNYEIWGAKMUSQO", 22),
    ("ESOVPZJAYQUIRHXLNFTGKDCMWB", 10),
    ("VZBRGITYUPSDNHLXAWMJQOFECK", 26),
)

REFLECTORS: dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}

ROTOR_NAMES = ("I", "II", "III", "IV", "V")
N_ROTORS = len(_ROTOR_TABLE)


@dataclass(frozen=True)
class RotorSpec:
    index: int
    wiring: str
    notch: int

    @property
    def name(self) -> str:
        return ROTOR_NAMES[self.index - 1]

    @property
    def turnover(self) -> str:
        # letter showing in the window when the notch engages
        return chr(ord("A") + self.notch - 1)

    def mapping(self) -> Mapping:
        """Forward wiring; the inverse table is derived alongside it."""
        return Mapping(self.wiring)


ROTORS: tuple[RotorSpec, ...] = tuple(
    RotorSpec(index=i + 1, wiring=w, notch=n) for i, (w, n) in enumerate(_ROTOR_TABLE)
)


def get_rotor(index: int) -> RotorSpec:
    """Catalog lookup by 1-based rotor number."""
    if not 1 <= index <= N_ROTORS:
        raise KeyError(f"No rotor {index}; catalog holds 1..{N_ROTORS}.")
    return ROTORS[index - 1]


def get_reflector_wiring(name: str) -> str:
    return REFLECTORS[name.upper()]


def list_rotors() -> list[RotorSpec]:
    return list(ROTORS)


def list_reflectors() -> list[tuple[str, str]]:
    return sorted(REFLECTORS.items())
