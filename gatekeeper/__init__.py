"""Gatekeeper: credential verification and session issuance with an email-verification gate."""

__version__ = "0.1.0"
