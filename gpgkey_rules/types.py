"""Type definitions for gpgkey-rules."""

from enum import StrEnum


class KeyAlgorithm(StrEnum):
    """Public key algorithm families accepted for a key's type."""

    RSA = "RSA"
    DSA = "DSA"
    ECC = "ECC"
    ELGAMAL = "ELGAMAL"
    ECDSA = "ECDSA"
    DH = "DH"


class LogLevel(StrEnum):
    """Log levels accepted in the configuration file."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
