from __future__ import annotations

from typing import Iterable

from enigmamachine.core.common import ALPHABET, N_LETTERS, index_letter, is_az, letter_index


class Mapping:
    """
    Bijective A-Z substitution, stored as two 26-entry index tables.

    Built from a 26-letter permutation string: letter i of ALPHABET maps to
    wiring[i]. The inverse table is derived once here and never changes
    independently of the forward one.
    """

    __slots__ = ("_forward", "_inverse")

    def __init__(self, wiring: str) -> None:
        w = wiring.upper()
        if not wiring.isascii():
            raise ValueError("Mapping may only contain letters A-Z.")
        if len(w) != N_LETTERS:
            raise ValueError(f"Mapping needs exactly 26 letters, got {len(w)}.")
        if not all(is_az(ch) for ch in w):
            raise ValueError("Mapping may only contain letters A-Z.")
        if len(set(w)) != N_LETTERS:
            raise ValueError("Mapping must be a permutation with no repeats.")

        forward = tuple(letter_index(ch) for ch in w)
        inverse = [0] * N_LETTERS
        for src, dst in enumerate(forward):
            inverse[dst] = src

        self._forward = forward
        self._inverse = tuple(inverse)

    @property
    def wiring(self) -> str:
        return "".join(index_letter(i) for i in self._forward)

    def forward(self, idx: int) -> int:
        return self._forward[idx]

    def backward(self, idx: int) -> int:
        return self._inverse[idx]

    def is_involution(self) -> bool:
        return all(self._forward[self._forward[i]] == i for i in range(N_LETTERS))

    def fixed_points(self) -> str:
        return "".join(ALPHABET[i] for i in range(N_LETTERS) if self._forward[i] == i)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self._forward == other._forward

    def __hash__(self) -> int:
        return hash(self._forward)

    def __repr__(self) -> str:
        return f"Mapping({self.wiring!r})"


class Plugboard:
    """
    Stecker board: symmetric swaps for the paired letters only.

    Unpaired letters are not stored and pass through unchanged. Pairs are
    applied in order, so with validation skipped a later pair overrides an
    earlier one for a shared letter.
    """

    __slots__ = ("_swaps",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        swaps: dict[int, int] = {}
        for a, b in pairs:
            ia, ib = letter_index(a), letter_index(b)
            swaps[ia] = ib
            swaps[ib] = ia
        self._swaps = swaps

    def swap(self, idx: int) -> int:
        return self._swaps.get(idx, idx)

    @property
    def pairs(self) -> list[str]:
        seen: set[int] = set()
        out: list[str] = []
        for a, b in self._swaps.items():
            if a in seen or a == b:
                continue
            seen.update((a, b))
            out.append(index_letter(a) + index_letter(b))
        return out

    def __repr__(self) -> str:
        return f"Plugboard({' '.join(self.pairs)!r})"
