class DomainError(Exception):
    """Base exception for business rule violations.

    `kind` is the machine-readable error name sent to clients and
    `status_code` the HTTP status the controllers answer with.
    """

    kind = "domain_error"
    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is invalid or missing."""

    kind = "validation_error"


class AuthenticationError(DomainError):
    """Raised when a login code does not match any user."""

    kind = "invalid_code"


class NotFoundError(DomainError):
    """Raised when a referenced user does not exist."""

    kind = "user_not_found"
    status_code = 404


class DuplicateCheckInError(DomainError):
    """Raised when a user already checked in on the same calendar day."""

    kind = "duplicate_check_in"


class NoOpenSessionError(DomainError):
    """Raised when checking out without a pending check-in."""

    kind = "no_open_session"


class DuplicateCodeError(DomainError):
    """Raised by repositories when an access code is already taken."""

    kind = "duplicate_code"
    status_code = 409


class CodeGenerationError(DomainError):
    """Raised when no free access code was found within the attempt limit."""

    kind = "code_generation_failed"
    status_code = 503
