"""Validation rules for OpenPGP key fields.

A rule exposes the shape a validation framework expects: ``rule(value,
context)`` decides whether a field value is acceptable and
``default_error_message(value, context)`` gives the message to show when
it is not. Rules never raise; an invalid value is only ever a False result.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from gpgkey_rules import i18n
from gpgkey_rules.algorithms import is_valid_algorithm
from gpgkey_rules.i18n import Translator
from gpgkey_rules.result import Failure, Result, Success


class ValidationRule(ABC):
    """Base class for field validation rules."""

    def __init__(self: "ValidationRule", translator: Translator | None = None) -> None:
        """Create a rule.

        Args:
        ----
            translator: Message translator; the process-wide one when omitted

        """
        self._translator = translator

    def translate(self: "ValidationRule", message: str) -> str:
        """Translate a message with the rule's translator."""
        if self._translator is None:
            return i18n.translate(message)
        return self._translator(message)

    @abstractmethod
    def rule(self: "ValidationRule", value: Any, context: Any) -> bool:
        """Return True if the value passes the rule."""

    @abstractmethod
    def default_error_message(self: "ValidationRule", value: Any, context: Any) -> str:
        """Return the message shown when the value fails the rule."""

    def __call__(self: "ValidationRule", value: Any, context: Any = None) -> bool:
        return self.rule(value, context)

    def check(self: "ValidationRule", value: Any, context: Any = None) -> Result[Any, str]:
        """Run the rule and bundle the outcome with its error message.

        Returns
        -------
            Success with the value, or Failure with the error message

        """
        if self.rule(value, context):
            return Success(value)
        return Failure(self.default_error_message(value, context))


class IsValidGpgkeyTypeValidationRule(ValidationRule):
    """Accept only the name of a supported public key algorithm."""

    def __init__(
        self: "IsValidGpgkeyTypeValidationRule",
        membership: Callable[[str], bool] = is_valid_algorithm,
        translator: Translator | None = None,
    ) -> None:
        super().__init__(translator)
        self._membership = membership

    def is_valid(self: "IsValidGpgkeyTypeValidationRule", value: Any) -> bool:
        """Check that the value is a string naming a supported algorithm."""
        if not isinstance(value, str):
            return False
        return self._membership(value)

    def rule(self: "IsValidGpgkeyTypeValidationRule", value: Any, context: Any) -> bool:
        return self.is_valid(value)

    def default_error_message(self: "IsValidGpgkeyTypeValidationRule", value: Any, context: Any) -> str:
        return self.translate("The type should be one of the following: RSA, DSA, ECC, ELGAMAL, ECDSA, DH.")
