"""Pytest configuration and shared fixtures for gpgkey-rules tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from gpgkey_rules import i18n
from tests.helpers import write_yaml

TYPE_MESSAGE = "The type should be one of the following: RSA, DSA, ECC, ELGAMAL, ECDSA, DH."
TYPE_MESSAGE_FR = "Le type doit être l'un des suivants : RSA, DSA, ECC, ELGAMAL, ECDSA, DH."


@pytest.fixture(autouse=True)
def reset_translator() -> Iterator[None]:
    """Keep the process-wide translator from leaking between tests."""
    i18n.set_translator(None)
    yield
    i18n.set_translator(None)


@pytest.fixture
def runner() -> CliRunner:
    """Provides a Click CliRunner instance."""
    return CliRunner()


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    """Provides a French message catalog."""
    return write_yaml(
        tmp_path / "fr.yaml",
        {"locale": "fr_FR", "messages": {TYPE_MESSAGE: TYPE_MESSAGE_FR}},
    )
