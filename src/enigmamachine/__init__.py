from enigmamachine.core.errors import (
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
from enigmamachine.machine.enigma import EnigmaMachine, decrypt, decrypt_text, encrypt, encrypt_text

__version__ = "0.1.0"

__all__ = [
    "EnigmaMachine",
    "encrypt",
    "decrypt",
    "encrypt_text",
    "decrypt_text",
    "EnigmaError",
    "EnigmaSettingsError",
    "InvalidPlaintext",
    "InvalidStecker",
    "InvalidReflector",
    "InvalidRingLength",
    "InvalidRingChar",
    "InvalidKeyLength",
    "InvalidKeyChar",
    "InvalidRotorId",
    "DuplicateRotor",
]
