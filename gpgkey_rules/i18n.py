"""Message translation for validation errors.

Messages are looked up by their English text. A catalog is a YAML file
with a top-level ``messages`` mapping:

    messages:
      "The type should be one of the following: RSA, DSA, ECC, ELGAMAL, ECDSA, DH.": "..."

Without a catalog every message is returned unchanged.
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from gpgkey_rules.result import Failure, Result, Success

logger = logging.getLogger(__name__)

Translator = Callable[[str], str]

yaml = YAML(typ="safe")


def identity(message: str) -> str:
    """Return the message untranslated."""
    return message


class MessageCatalog(Mapping[str, str]):
    """Read-only mapping of English messages to their translations."""

    def __init__(self: "MessageCatalog", messages: Mapping[str, str], locale: str | None = None) -> None:
        self._messages = dict(messages)
        self.locale = locale

    def __getitem__(self: "MessageCatalog", key: str) -> str:
        return self._messages[key]

    def __iter__(self: "MessageCatalog") -> Iterator[str]:
        return iter(self._messages)

    def __len__(self: "MessageCatalog") -> int:
        return len(self._messages)

    def translate(self: "MessageCatalog", message: str) -> str:
        """Translate a message, falling back to the message itself."""
        return self._messages.get(message, message)

    __call__ = translate


def load_catalog(path: Path) -> Result[MessageCatalog, str]:
    """Load a message catalog from a YAML file.

    Args:
    ----
        path: Path to the catalog file

    Returns:
    -------
        Result with the MessageCatalog or error message

    """
    if not path.exists():
        return Failure(f"Message catalog not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.load(f) or {}
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        return Failure(f"Error reading message catalog {path}: {e!s}")

    if not isinstance(data, dict):
        return Failure(f"Invalid message catalog {path}: expected a mapping")

    messages = data.get("messages") or {}
    if not isinstance(messages, dict):
        return Failure(f"Invalid message catalog {path}: 'messages' must be a mapping")

    bad_entries = [key for key, value in messages.items() if not isinstance(key, str) or not isinstance(value, str)]
    if bad_entries:
        return Failure(f"Invalid message catalog {path}: non-string entries for {bad_entries}")

    logger.info(f"Loaded {len(messages)} messages from {path}")
    return Success(MessageCatalog(messages, locale=data.get("locale")))


_active_translator: Translator = identity


def set_translator(translator: Translator | None) -> None:
    """Install the process-wide translator; None restores the identity."""
    global _active_translator
    _active_translator = translator if translator is not None else identity


def get_translator() -> Translator:
    """Return the process-wide translator."""
    return _active_translator


def translate(message: str) -> str:
    """Translate a message with the process-wide translator."""
    return _active_translator(message)


__ = translate
