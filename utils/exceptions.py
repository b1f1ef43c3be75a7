"""
Error taxonomy shared by the auth core and the API layer.

Every exception carries the HTTP status, the error code and the public
message used by api.errors to build the response envelope. Credential
failures share one generic message; the concrete subclass is only logged.
"""
from __future__ import annotations


class ChirpyError(Exception):
    status = 500
    error = "INTERNAL_ERROR"
    message = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidCredential(ChirpyError):
    status = 401
    error = "UNAUTHORIZED"
    message = "Invalid credentials"


class MissingCredential(ChirpyError):
    status = 401
    error = "UNAUTHORIZED"
    message = "Missing credentials"


class InvalidSignature(InvalidCredential):
    pass


class TokenExpired(InvalidCredential):
    pass


class MalformedToken(InvalidCredential):
    pass


class TokenRevoked(InvalidCredential):
    pass


class TokenNotFound(InvalidCredential):
    pass


class Forbidden(ChirpyError):
    status = 403
    error = "FORBIDDEN"
    message = "Forbidden"


class NotFound(ChirpyError):
    status = 404
    error = "NOT_FOUND"
    message = "Resource not found"


class BadRequest(ChirpyError):
    status = 400
    error = "BAD_REQUEST"
    message = "Bad request"


class Internal(ChirpyError):
    pass
