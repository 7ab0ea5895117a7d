from __future__ import annotations


class StorefrontError(Exception):
    """
    Base for every error the storefront raises on purpose.

    `status_code` is what the HTTP boundary answers with; services never look at it.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(StorefrontError):
    status_code = 404


class ValidationError(StorefrontError):
    status_code = 400


class AlreadyExists(StorefrontError):
    status_code = 400


class InvalidCredentials(StorefrontError):
    status_code = 401


class InvalidToken(StorefrontError):
    status_code = 401


class Unauthenticated(StorefrontError):
    status_code = 401


class Forbidden(StorefrontError):
    status_code = 403


class StorageError(StorefrontError):
    status_code = 500
