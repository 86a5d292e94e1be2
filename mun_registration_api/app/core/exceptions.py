"""
Custom exceptions for the registration API.

Every failure the service layer can report derives from
``RegistrationAPIError`` and carries a human-readable message plus a
machine-checkable ``error_code``.  The HTTP layer maps each class to a
status code in ``main.create_app``.
"""

from typing import Dict, List, Optional


class RegistrationAPIError(Exception):
    """Base exception for the registration API."""

    def __init__(self, message: str, error_code: str = "ERROR"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ValidationError(RegistrationAPIError):
    """
    Raised when input does not meet the registration rules.

    ``errors`` holds one ``{"field": ..., "message": ...}`` entry per
    violated field so clients can show every problem at once.
    """

    def __init__(self, errors: List[Dict[str, str]], message: str = "Invalid registration data"):
        super().__init__(message, "VALIDATION_ERROR")
        self.errors = errors


class DuplicateRegistrationError(RegistrationAPIError):
    """Raised when the (name, class, division) triple is already registered."""

    def __init__(self, name: str, class_: str, division: str):
        super().__init__("Student is already registered for MUN", "DUPLICATE_REGISTRATION")
        self.name = name
        self.class_ = class_
        self.division = division


class NotFoundError(RegistrationAPIError):
    """Raised when an operation targets a record that does not exist."""

    def __init__(self, kind: str, identifier):
        super().__init__(f"{kind} {identifier} not found", "NOT_FOUND")
        self.kind = kind
        self.identifier = identifier


class AuthenticationFailedError(RegistrationAPIError):
    """Raised when the admin credential check fails."""

    def __init__(self, username: Optional[str] = None):
        super().__init__("Invalid credentials", "AUTH_FAILED")
        self.username = username


class StoreError(RegistrationAPIError):
    """
    Raised when the underlying database fails.

    ``details`` keeps the driver message for logs; the client only sees
    the generic message.
    """

    def __init__(self, operation: str, details: str):
        super().__init__("Server error", "STORE_ERROR")
        self.operation = operation
        self.details = details
