"""
Domain Errors

Every rule violation raised by the domain apps derives from DomainError.
The API layer turns them into responses with the carried reason, code and
HTTP status; none of them is meant to crash the process.
"""


class DomainError(Exception):
    """Base class for recoverable business rule violations."""

    code = 'domain_error'
    status_code = 400

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ValidationError(DomainError):
    """Malformed input: inverted time range, missing field, equipment shortage."""

    code = 'validation_error'
    status_code = 400


class ConflictError(ValidationError):
    """Overlapping booking, found by the pre-check or by a storage constraint."""

    code = 'conflict'
    status_code = 409


class StateError(DomainError):
    """Operation not allowed in the current lifecycle state."""

    code = 'invalid_state'
    status_code = 409


class InsufficientCreditsError(DomainError):
    """Meal credits are exhausted."""

    code = 'insufficient_credits'
    status_code = 402
