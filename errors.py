"""
Exception types raised by the relay and mapped to HTTP responses in main.py.
"""
from fastapi import status


class RelayError(Exception):
    """Base class for relay errors."""


class ConfigurationError(RelayError):
    """Mandatory configuration is missing; the application must not start."""


class ChatValidationError(RelayError):
    """Inbound chat request failed its precondition checks."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CompletionError(RelayError):
    """
    Completion call failed.

    Covers both an upstream rejection (status_code is the upstream status)
    and a transport failure where no response was received (status_code 500).
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
