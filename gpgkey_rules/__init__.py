"""Validation rules for OpenPGP public key metadata."""

__version__ = "0.1.0"
