from .errors import (
    DuplicateRotor,
    EnigmaError,
    EnigmaSettingsError,
    InvalidKeyChar,
    InvalidKeyLength,
    InvalidPlaintext,
    InvalidReflector,
    InvalidRingChar,
    InvalidRingLength,
    InvalidRotorId,
    InvalidStecker,
)
from .models import EnigmaSettings, MachineState

__all__ = [
    "DuplicateRotor",
    "EnigmaError",
    "EnigmaSettingsError",
    "InvalidKeyChar",
    "InvalidKeyLength",
    "InvalidPlaintext",
    "InvalidReflector",
    "InvalidRingChar",
    "InvalidRingLength",
    "InvalidRotorId",
    "InvalidStecker",
    "EnigmaSettings",
    "MachineState",
]
