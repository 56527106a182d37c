"""Helper functions for gpgkey-rules tests."""

from pathlib import Path
from typing import Any

from cryptography.hazmat.primitives.asymmetric.types import PublicKeyTypes
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from ruamel.yaml import YAML


def write_yaml(path: Path, data: dict[str, Any]) -> Path:
    """Write a dictionary to a YAML file."""
    yaml = YAML()
    with path.open("w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


def write_public_key(path: Path, public_key: PublicKeyTypes) -> Path:
    """Write a public key as PEM SubjectPublicKeyInfo."""
    path.write_bytes(public_key.public_bytes(Encoding.PEM, PublicFormat.SubjectPublicKeyInfo))
    return path
