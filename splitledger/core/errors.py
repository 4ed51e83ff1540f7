"""
Ledger error hierarchy.

All errors inherit from LedgerError so callers (and the HTTP adapter)
can catch them in one place. Every error is raised before any state is
mutated; nothing is retried internally.
"""

from typing import Any, Dict, Optional


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    kind = "ledger_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ValidationError(LedgerError):
    """Split values don't add up: amounts != expense total, percentages != 100."""

    kind = "validation_error"


class InvalidInput(LedgerError):
    """Malformed parameters: size mismatch, non-positive amount, duplicates, self-payment."""

    kind = "invalid_input"


class StateError(LedgerError):
    """
    Ledger state is inconsistent (net positions don't sum to zero, or a
    pair isn't antisymmetric). Indicates an upstream bug; never retried.
    """

    kind = "state_error"


class GroupNotFound(LedgerError):
    """Raised when a group id is not registered."""

    kind = "group_not_found"
