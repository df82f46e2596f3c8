from __future__ import annotations

import logging
from typing import Iterable, Sequence, Union

from enigmamachine.core.catalog import N_ROTORS, REFLECTORS, get_reflector_wiring
from enigmamachine.core.common import is_letter_ci
from enigmamachine.core.errors import (
    DuplicateRotor,
    InvalidKeyChar,
    InvalidKeyLength,
    InvalidReflector,
    InvalidRingChar,
    InvalidRingLength,
    InvalidRotorId,
    InvalidStecker,
)
from enigmamachine.core.models import EnigmaSettings

logger = logging.getLogger(__name__)

SteckerSpec = Union[str, Iterable[Sequence[str]]]


def parse_stecker(stecker: SteckerSpec, *, skip_validation: bool = False) -> tuple[tuple[str, str], ...]:
    """
    Accept either:
      1) flat string of consecutive pairs, e.g. "ABCD" (A<->B, C<->D)
      2) list of pairs, e.g. [("A", "B"), ("C", "D")] or ["AB", "CD"]
    Returns uppercase pairs. Empty input gives an empty plugboard.

    With skip_validation, letters may appear in more than one pair.
    """
    if stecker is None:
        return ()

    if isinstance(stecker, str):
        if len(stecker) % 2 != 0:
            raise InvalidStecker(f"Stecker string must be of even length, got {len(stecker)}.", stecker)
        raw_pairs = [stecker[i:i + 2] for i in range(0, len(stecker), 2)]
    else:
        raw_pairs = list(stecker)

    pairs: list[tuple[str, str]] = []
    for item in raw_pairs:
        raw = "".join(item)
        if len(raw) != 2 or not all(is_letter_ci(ch) for ch in raw):
            raise InvalidStecker(f"Bad pair {item!r}. Use two letters like 'AB'.", stecker)
        p = raw.upper()
        pairs.append((p[0], p[1]))

    if not skip_validation:
        seen: set[str] = set()
        for a, b in pairs:
            for ch in (a, b):
                if ch in seen:
                    raise InvalidStecker(f"No letter may appear more than once, '{ch}' does.", stecker)
                seen.add(ch)

    return tuple(pairs)


def parse_reflector(reflector: str) -> str:
    """Resolve 'A'/'B'/'C' (any case) or validate an explicit 26-letter wiring."""
    if not isinstance(reflector, str):
        raise InvalidReflector(f"Reflector must be a string, got {type(reflector).__name__}.", reflector)

    if not all(is_letter_ci(ch) for ch in reflector):
        raise InvalidReflector("Reflector wiring may only contain letters A-Z.", reflector)
    ref = reflector.upper()
    if len(ref) == 1:
        if ref not in REFLECTORS:
            raise InvalidReflector(
                f"Reflector '{reflector}' unrecognised. Available: {', '.join(sorted(REFLECTORS))}.",
                reflector,
            )
        return get_reflector_wiring(ref)

    if len(ref) != 26:
        raise InvalidReflector(f"Reflector must be one of A, B, C or a 26-char string, got {len(ref)} chars.", reflector)
    if len(set(ref)) != 26:
        raise InvalidReflector("Reflector must not contain any character used more than once.", reflector)
    return ref


def _parse_triplet(value: str, *, length_error: type, char_error: type, what: str) -> str:
    if not isinstance(value, str) or len(value) != 3:
        raise length_error(f"{what} settings must be a string of length 3.", value)
    for ch in value:
        if not is_letter_ci(ch):
            raise char_error(f"{what} settings must be Roman letters A-Z, got '{ch}'.", value)
    return value.upper()


def parse_ring(ring: str) -> str:
    return _parse_triplet(ring, length_error=InvalidRingLength, char_error=InvalidRingChar, what="Ring")


def parse_key(key: str) -> str:
    return _parse_triplet(key, length_error=InvalidKeyLength, char_error=InvalidKeyChar, what="Key")


def parse_rotor_order(rotors: Sequence[int]) -> tuple[int, int, int]:
    order = list(rotors)
    if len(order) != 3:
        raise InvalidRotorId(f"Exactly 3 rotors are required, got {len(order)}.", rotors)
    for r in order:
        if isinstance(r, bool) or not isinstance(r, int) or not 1 <= r <= N_ROTORS:
            raise InvalidRotorId(f"Each rotor must be an integer between 1 and {N_ROTORS}, got {r!r}.", rotors)
    if len(set(order)) != len(order):
        raise DuplicateRotor("No rotor may appear more than once.", rotors)
    return (order[0], order[1], order[2])


def parse_settings(
    rotor_order: Sequence[int],
    key: str,
    *,
    reflector: str = "B",
    ring: str = "AAA",
    plugboard: SteckerSpec = (),
    skip_plugboard_validation: bool = False,
) -> EnigmaSettings:
    """
    Validate every setting and return the canonical form.
    Nothing is built until all of them pass.
    """
    settings = EnigmaSettings(
        rotor_order=parse_rotor_order(rotor_order),
        key=parse_key(key),
        ring=parse_ring(ring),
        reflector=parse_reflector(reflector),
        plugboard=parse_stecker(plugboard, skip_validation=skip_plugboard_validation),
    )
    logger.debug("parsed settings %s", settings.to_dict())
    return settings
