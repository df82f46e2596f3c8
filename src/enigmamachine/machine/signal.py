from __future__ import annotations

from dataclasses import dataclass

from enigmamachine.core.common import N_LETTERS, index_letter, letter_index
from enigmamachine.core.mapping import Mapping, Plugboard


@dataclass(frozen=True)
class Wiring:
    """Everything on the signal path that does not move: built once per machine."""

    plugboard: Plugboard
    left: Mapping
    middle: Mapping
    right: Mapping
    reflector: Mapping


def encipher_index(idx: int, left_mov: int, middle_mov: int, right_mov: int, wiring: Wiring) -> int:
    """
    Send one letter index (0..25) through the machine for the given rotor movements.

    A rotor's rotation is modelled as shifting the contact index into it and
    back out again, so the wiring tables never change with position. Between
    two rotors only the difference of their movements matters.
    """
    n = N_LETTERS

    c = wiring.plugboard.swap(idx)

    # in: right -> middle -> left
    c = wiring.right.forward((c + right_mov) % n)
    c = wiring.middle.forward((c - right_mov + middle_mov) % n)
    c = wiring.left.forward((c - middle_mov + left_mov) % n)

    # reflector is fixed in the housing
    c = wiring.reflector.forward((c - left_mov) % n)

    # out: left -> middle -> right, through the inverse tables
    c = wiring.left.backward((c + left_mov) % n)
    c = wiring.middle.backward((c - left_mov + middle_mov) % n)
    c = wiring.right.backward((c - middle_mov + right_mov) % n)

    return wiring.plugboard.swap((c - right_mov) % n)


def encipher_letter(ch: str, movements: tuple[int, int, int], wiring: Wiring) -> str:
    """Letter-level wrapper around encipher_index; movements are (left, middle, right)."""
    left_mov, middle_mov, right_mov = movements
    return index_letter(encipher_index(letter_index(ch), left_mov, middle_mov, right_mov, wiring))
