from __future__ import annotations

from enigmamachine.core.common import N_LETTERS, letter_index
from enigmamachine.core.models import MachineState


def _notch_counter(notch: int, position: int) -> int:
    # keystrokes until this rotor carries; 0 would mean "never", so it's a full turn
    return (notch - position) % N_LETTERS or N_LETTERS


def initial_state(notches: tuple[int, int, int], key: str, ring: str) -> MachineState:
    """
    Derive the starting counters for (left, middle, right) rotors.

    The notch sits on the alphabet ring, so turnover depends on the visible
    key letter only. Movement counters are the key offset less the ring
    offset, kept positive by an extra full turn.
    """
    key_pos = [letter_index(ch) for ch in key]
    ring_pos = [letter_index(ch) for ch in ring]
    moves = [N_LETTERS + k - r for k, r in zip(key_pos, ring_pos)]
    counters = [_notch_counter(n, k) for n, k in zip(notches, key_pos)]

    return MachineState(
        left_movements=moves[0],
        middle_movements=moves[1],
        right_movements=moves[2],
        left_notch=counters[0],
        middle_notch=counters[1],
        right_notch=counters[2],
    )


def _advance_left(state: MachineState) -> None:
    state.left_movements += 1
    state.left_notch -= 1
    if state.left_notch == 0:
        state.left_notch = N_LETTERS


def step(state: MachineState) -> bool:
    """
    Rotate the rotors for one keystroke. Returns True when the double step fired.

    Order matters: the ordinary carry chain runs first, then the double-step
    check looks at the counters it left behind.
    """
    state.steps += 1

    state.right_notch -= 1
    state.right_movements += 1
    if state.right_notch == 0:
        state.right_notch = N_LETTERS

        state.middle_movements += 1
        state.middle_notch -= 1
        if state.middle_notch == 0:
            state.middle_notch = N_LETTERS
            _advance_left(state)

    # middle rotor sitting on its notch drags itself and the left rotor along
    if state.right_notch == N_LETTERS - 1 and state.middle_notch == 1:
        state.middle_notch = N_LETTERS
        state.middle_movements += 1
        _advance_left(state)
        return True

    return False
