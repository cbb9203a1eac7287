"""Application error taxonomy.

Every error raised by the services is a ``MovieAPIError`` subclass tagged with
an ``ErrorKind``. Callers branch on ``exc.kind`` (or the class), never on the
message text. The API layer maps each kind to an HTTP status code.
"""

from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    """Closed set of error kinds."""

    VALIDATION = "validation"
    INVALID_CREDENTIALS = "invalid_credentials"
    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"
    DUPLICATE_IDENTITY = "duplicate_identity"
    INVALID_VERIFICATION_TOKEN = "invalid_verification_token"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"


class MovieAPIError(Exception):
    """Base class for all application errors."""

    kind: ErrorKind
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MovieAPIError):
    """Required input missing or malformed."""

    kind = ErrorKind.VALIDATION
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidCredentialsError(MovieAPIError):
    """Unknown email or wrong password. The two cases are indistinguishable."""

    kind = ErrorKind.INVALID_CREDENTIALS
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Incorrect email or password"


class MissingTokenError(MovieAPIError):
    """No bearer token, or an Authorization header that is not ``Bearer <token>``."""

    kind = ErrorKind.MISSING_TOKEN
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied. No token provided"


class InvalidTokenError(MovieAPIError):
    """Bearer token with a bad signature, bad claims or past its expiry."""

    kind = ErrorKind.INVALID_TOKEN
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"


class DuplicateIdentityError(MovieAPIError):
    """Username or email already registered."""

    kind = ErrorKind.DUPLICATE_IDENTITY
    status_code = status.HTTP_409_CONFLICT
    default_message = "Username or email already registered"


class InvalidVerificationTokenError(MovieAPIError):
    """Verification token never issued or already consumed."""

    kind = ErrorKind.INVALID_VERIFICATION_TOKEN
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid verification token"


class NotFoundError(MovieAPIError):
    """Requested catalog entity does not exist."""

    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConfigurationError(MovieAPIError):
    """Server is missing required configuration."""

    kind = ErrorKind.CONFIGURATION
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server configuration error"
