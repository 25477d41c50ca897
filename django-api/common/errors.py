"""Domain error taxonomy shared by every module.

Every error carries a machine-readable code and a user-safe message.
Handlers map the four families below to transport responses; services
only ever raise them.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: Enum
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Malformed or missing input. Names the failing field and rule."""

    def __init__(self, code: Enum, message: str, field: str, rule: str) -> None:
        super().__init__(code=code, message=message)
        self.field = field
        self.rule = rule


class NotFoundError(DomainError):
    """A referenced record does not exist."""


class AuthorizationError(DomainError):
    """The requester may not perform the operation on this record."""


class BusinessRuleViolation(DomainError):
    """The request is well-formed but breaks a booking rule."""
