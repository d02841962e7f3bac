"""Custom exceptions for the application."""


class InkfolioException(Exception):
    """Base exception for all Inkfolio errors."""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


# Authentication Exceptions
class InvalidCredentialError(InkfolioException):
    """Supplied admin password did not match."""
    def __init__(self, message: str = "Invalid password"):
        super().__init__(message, status_code=401)


class MissingTokenError(InkfolioException):
    """No bearer token on a request that needs one."""
    def __init__(self, message: str = "Missing token"):
        super().__init__(message, status_code=401)


class InvalidOrExpiredTokenError(InkfolioException):
    """Bearer token failed signature, claim or expiry checks."""
    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, status_code=401)


# Resource Exceptions
class ResourceNotFoundError(InkfolioException):
    """Resource not found."""
    def __init__(self, resource: str, id: int):
        self.resource = resource
        self.resource_id = id
        super().__init__(f"{resource} with id {id} not found", status_code=404)


# Store Exceptions
class StoreFailureError(InkfolioException):
    """Backing store failed; the message is safe to show to clients."""
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status_code=500)


AUTH_ERRORS = (InvalidCredentialError, MissingTokenError, InvalidOrExpiredTokenError)
