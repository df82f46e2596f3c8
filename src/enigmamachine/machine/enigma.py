from __future__ import annotations

import logging
from typing import Optional, Sequence

from enigmamachine.core.catalog import get_rotor
from enigmamachine.core.common import index_letter, is_az, letter_index
from enigmamachine.core.errors import InvalidPlaintext
from enigmamachine.core.mapping import Mapping, Plugboard
from enigmamachine.core.models import EnigmaSettings, MachineState
from enigmamachine.core.settings import SteckerSpec, parse_settings
from enigmamachine.core.utils import normalize_az
from enigmamachine.machine.signal import Wiring, encipher_letter
from enigmamachine.machine.stepping import initial_state, step

logger = logging.getLogger(__name__)


def _check_plaintext(text: str) -> None:
    for pos, ch in enumerate(text):
        if not is_az(ch):
            raise InvalidPlaintext(
                f"Machine input must be uppercase A-Z only; got {ch!r} at position {pos}. "
                "Sanitise the text first (see encrypt_text)."
            )


class EnigmaMachine:
    """
    Three-rotor army Enigma (M3).

    Settings are validated and the wiring tables built once, here. The machine
    itself holds no rotor state: every call to encrypt() starts from the key
    setting with a fresh MachineState, so one instance can serve many messages.

    rotor_order is (left, middle, right), e.g. [1, 2, 3] for wheels I-II-III.
    """

    def __init__(
        self,
        rotor_order: Sequence[int],
        key: str,
        reflector: str = "B",
        ring: str = "AAA",
        plugboard: SteckerSpec = (),
        skip_plugboard_validation: bool = False,
    ) -> None:
        self.settings: EnigmaSettings = parse_settings(
            rotor_order,
            key,
            reflector=reflector,
            ring=ring,
            plugboard=plugboard,
            skip_plugboard_validation=skip_plugboard_validation,
        )

        specs = [get_rotor(i) for i in self.settings.rotor_order]
        self._notches = (specs[0].notch, specs[1].notch, specs[2].notch)

        reflector_map = Mapping(self.settings.reflector)
        if not reflector_map.is_involution() or reflector_map.fixed_points():
            logger.warning(
                "reflector %s is not a fixed-point-free involution; "
                "the machine will not decrypt its own output",
                self.settings.reflector,
            )

        self.wiring = Wiring(
            plugboard=Plugboard(self.settings.plugboard),
            left=specs[0].mapping(),
            middle=specs[1].mapping(),
            right=specs[2].mapping(),
            reflector=reflector_map,
        )
        logger.debug(
            "machine ready: rotors=%s key=%s ring=%s plugboard=%s",
            "-".join(s.name for s in specs),
            self.settings.key,
            self.settings.ring,
            " ".join(self.wiring.plugboard.pairs) or "-",
        )

    def initial_state(self) -> MachineState:
        return initial_state(self._notches, self.settings.key, self.settings.ring)

    def window(self, state: MachineState) -> str:
        """Letters showing through the windows for a given state."""
        return "".join(
            index_letter(mov + letter_index(r)) for mov, r in zip(state.movements, self.settings.ring)
        )

    def run(self, text: str, state: MachineState) -> str:
        """
        Encipher text against a caller-owned state, stepping it once per letter.
        Letters must be processed in order: each one depends on where the last left the rotors.
        """
        _check_plaintext(text)

        out = []
        for ch in text:
            if step(state):
                logger.debug("double step at keystroke %d, window %s", state.steps, self.window(state))
            out.append(encipher_letter(ch, state.movements, self.wiring))
        return "".join(out)

    def encrypt(self, text: str) -> str:
        state = self.initial_state()
        result = self.run(text, state)
        logger.debug("enciphered %d letters, final window %s, state %s", len(result), self.window(state), state.to_dict())
        return result

    def decrypt(self, text: str) -> str:
        # Same transformation; lowercase marks the direction
        return self.encrypt(text).lower()

    def __repr__(self) -> str:
        s = self.settings
        return (
            f"EnigmaMachine(rotor_order={list(s.rotor_order)}, key={s.key!r}, "
            f"ring={s.ring!r}, plugboard={' '.join(self.wiring.plugboard.pairs)!r})"
        )


def encrypt(
    plaintext: str,
    rotor_order: Sequence[int],
    key: str,
    reflector: str = "B",
    ring: str = "AAA",
    plugboard: SteckerSpec = (),
    skip_plugboard_validation: bool = False,
) -> str:
    """
    Encrypt uppercase A-Z text on an M3 Enigma.

    >>> encrypt("AAA", [1, 2, 3], "ABC")
    'CXT'

    reflector is 'A', 'B', 'C' or a full 26-letter wiring. plugboard is either
    a string of consecutive pairs ("ABDE": A<->B, D<->E) or a list of pairs
    ([("A", "B"), ("D", "E")]). No letter may appear in two pairs unless
    skip_plugboard_validation is set.
    """
    machine = EnigmaMachine(
        rotor_order,
        key,
        reflector=reflector,
        ring=ring,
        plugboard=plugboard,
        skip_plugboard_validation=skip_plugboard_validation,
    )
    return machine.encrypt(plaintext)


def decrypt(
    ciphertext: str,
    rotor_order: Sequence[int],
    key: str,
    reflector: str = "B",
    ring: str = "AAA",
    plugboard: SteckerSpec = (),
    skip_plugboard_validation: bool = False,
) -> str:
    """See encrypt; identical arguments. Returns lowercase."""
    return encrypt(
        ciphertext,
        rotor_order,
        key,
        reflector=reflector,
        ring=ring,
        plugboard=plugboard,
        skip_plugboard_validation=skip_plugboard_validation,
    ).lower()


def encrypt_text(text: Optional[str], rotor_order: Sequence[int], key: str, **settings) -> str:
    """Like encrypt, but strips punctuation/spaces and uppercases first."""
    return encrypt(normalize_az(text), rotor_order, key, **settings)


def decrypt_text(text: Optional[str], rotor_order: Sequence[int], key: str, **settings) -> str:
    return decrypt(normalize_az(text), rotor_order, key, **settings)
