"""Utilities for redacting sensitive data from command lines and log text."""

import re

# Patterns for sensitive data that should be redacted
SENSITIVE_PATTERNS = [
    # OpenSSH public keys: keep the key type, hide the body and comment
    (
        r"(ssh-rsa|ssh-ed25519|ssh-dss|ecdsa-sha2-nistp\d+|sk-ssh-ed25519@openssh\.com)"
        r"\s+[A-Za-z0-9+/=]+(\s+\S+)*",
        r"\1 REDACTED",
    ),
    # Terraform variables and env-style assignments holding secrets
    (r"((?:password|secret|token|api[_-]?key)[a-z_]*=)\S+", r"\1REDACTED"),
]


def redact_sensitive(text: str) -> str:
    """
    Redact sensitive data from text using pattern matching.

    Args:
        text: Text potentially containing sensitive data

    Returns:
        Text with sensitive data replaced with REDACTED markers

    Example:
        >>> redact_sensitive("-var=db_password=hunter2")
        '-var=db_password=REDACTED'
    """
    result = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        result = re.sub(pattern, replacement, result, flags=re.IGNORECASE)
    return result


def redact_command(command: list[str]) -> list[str]:
    """Redact every argument of a command line."""
    return [redact_sensitive(arg) for arg in command]
