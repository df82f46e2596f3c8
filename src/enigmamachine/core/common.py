from __future__ import annotations

import re

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")
Z_ORD = ord("Z")
N_LETTERS = 26

_ROTOR_SPLIT_RE = re.compile(r"[\s,:;\-]+")


def is_az(ch: str) -> bool:
    if len(ch) != 1:
        return False
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def is_letter_ci(ch: str) -> bool:
    """Case-insensitive is_az. ASCII only: 'ı'.upper() is 'I', and that must not count."""
    return len(ch) == 1 and ch.isascii() and is_az(ch.upper())


def letter_index(ch: str) -> int:
    """'A' -> 0 ... 'Z' -> 25. Caller guarantees an uppercase letter."""
    return ord(ch) - A_ORD


def index_letter(idx: int) -> str:
    return chr(A_ORD + idx % N_LETTERS)


def split_rotor_order(raw: str) -> list[int]:
    """
    Parse rotor orders like: "1,2,3" or "1 2 3" or "1:2:3" or "123"
    Returns a list of ints. Range and duplicate checks are left to the settings parser.
    """
    text = raw.strip()
    if not text:
        raise ValueError("Expected a rotor order like '1,2,3'.")

    parts = [p for p in _ROTOR_SPLIT_RE.split(text) if p]
    if len(parts) == 1 and parts[0].isdigit() and len(parts[0]) > 1:
        # "123": one digit per rotor, the catalog only goes up to 5
        parts = list(parts[0])

    try:
        return [int(p) for p in parts]
    except ValueError as e:
        raise ValueError(f"Rotor order must be integers, got '{raw}'.") from e
