"""
Utility functions and helpers.

Modules:
- files: Directory helpers
- log: Logging configuration
- redact: Secret redaction for logged command lines
"""
