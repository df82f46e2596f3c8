from __future__ import annotations

from typing import Any


class EnigmaError(ValueError):
    """Base class for everything the machine refuses to do."""


class InvalidPlaintext(EnigmaError):
    pass


class EnigmaSettingsError(EnigmaError):
    """
    A machine setting failed validation.

    `setting` names the argument that was rejected (e.g. "ring", "rotors"),
    `value` is what the caller passed in.
    """

    setting: str = "settings"

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message, value)

    @property
    def message(self) -> str:
        return self.args[0]

    @property
    def value(self) -> Any:
        return self.args[1]

    def __str__(self) -> str:
        return f"{self.setting}: {self.message}"


class InvalidStecker(EnigmaSettingsError):
    setting = "plugboard"


class InvalidReflector(EnigmaSettingsError):
    setting = "reflector"


class InvalidRingLength(EnigmaSettingsError):
    setting = "ring"


class InvalidRingChar(EnigmaSettingsError):
    setting = "ring"


class InvalidKeyLength(EnigmaSettingsError):
    setting = "key"


class InvalidKeyChar(EnigmaSettingsError):
    setting = "key"


class InvalidRotorId(EnigmaSettingsError):
    setting = "rotors"


class DuplicateRotor(EnigmaSettingsError):
    setting = "rotors"
