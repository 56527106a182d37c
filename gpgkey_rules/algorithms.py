"""Supported public key algorithms.

This module owns the list of algorithm names a key's type may take. Rules
ask it for membership instead of keeping their own copy of the list.
"""

import logging
import warnings

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed448, ed25519, rsa, x448, x25519
from cryptography.hazmat.primitives.asymmetric.types import PublicKeyTypes
from cryptography.hazmat.primitives.serialization import load_pem_public_key
from cryptography.utils import CryptographyDeprecationWarning

from gpgkey_rules.result import Failure, Result, Success
from gpgkey_rules.types import KeyAlgorithm

logger = logging.getLogger(__name__)

SUPPORTED_ALGORITHMS: tuple[KeyAlgorithm, ...] = tuple(KeyAlgorithm)

_SUPPORTED_NAMES = frozenset(algorithm.value for algorithm in SUPPORTED_ALGORITHMS)

# EdDSA and Montgomery curve keys are reported under the generic ECC family
_KEY_TYPE_ALGORITHMS: tuple[tuple[type, KeyAlgorithm], ...] = (
    (rsa.RSAPublicKey, KeyAlgorithm.RSA),
    (dsa.DSAPublicKey, KeyAlgorithm.DSA),
    (ec.EllipticCurvePublicKey, KeyAlgorithm.ECDSA),
    (ed25519.Ed25519PublicKey, KeyAlgorithm.ECC),
    (ed448.Ed448PublicKey, KeyAlgorithm.ECC),
    (x25519.X25519PublicKey, KeyAlgorithm.ECC),
    (x448.X448PublicKey, KeyAlgorithm.ECC),
)


def _dh_public_key_type() -> type | None:
    """Return the finite field DH public key class, if cryptography still has it."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", CryptographyDeprecationWarning)
        try:
            from cryptography.hazmat.primitives.asymmetric import dh

            return dh.DHPublicKey
        except (ImportError, AttributeError):
            return None


def is_valid_algorithm(name: str) -> bool:
    """Check whether a name is one of the supported algorithm types.

    The comparison is exact: "rsa" and "RSA " are not accepted.
    """
    return name in _SUPPORTED_NAMES


def supported_algorithm_names() -> list[str]:
    """Return the supported algorithm names in canonical order."""
    return [algorithm.value for algorithm in SUPPORTED_ALGORITHMS]


def get_key_algorithm(public_key: PublicKeyTypes) -> Result[KeyAlgorithm, str]:
    """Determine the algorithm family of a public key.

    Args:
    ----
        public_key: A public key object from the cryptography package

    Returns:
    -------
        Result with the KeyAlgorithm or error message

    """
    for key_type, algorithm in _KEY_TYPE_ALGORITHMS:
        if isinstance(public_key, key_type):
            return Success(algorithm)
    dh_key_type = _dh_public_key_type()
    if dh_key_type is not None and isinstance(public_key, dh_key_type):
        return Success(KeyAlgorithm.DH)
    return Failure(f"Unsupported public key type: {type(public_key).__name__}")


def load_public_key_algorithm(pem_data: bytes) -> Result[KeyAlgorithm, str]:
    """Load a PEM encoded public key and determine its algorithm family.

    Args:
    ----
        pem_data: PEM encoded SubjectPublicKeyInfo

    Returns:
    -------
        Result with the KeyAlgorithm or error message

    """
    try:
        public_key = load_pem_public_key(pem_data)
    except (ValueError, UnsupportedAlgorithm) as e:
        return Failure(f"Unable to load public key: {e!s}")

    result = get_key_algorithm(public_key)
    if isinstance(result, Success):
        logger.debug(f"Loaded {result.value} public key")
    return result
