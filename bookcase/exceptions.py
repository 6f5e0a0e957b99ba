# bookcase/exceptions.py
"""Error taxonomy shared by the services, the REST layer and the client.

Each kind carries the HTTP status it maps to.  The message is what the
REST layer writes back as the plain-text response body.
"""


class BookcaseError(Exception):
    """Base class for all bookcase errors"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class BadRequest(BookcaseError):
    """Payload failed validation or referenced a missing row"""
    status_code = 400


class NotFound(BookcaseError):
    """No row exists for the requested identifier"""
    status_code = 404


class NotUnique(BookcaseError):
    """A uniqueness constraint or optimistic version check failed"""
    status_code = 409


class InternalServerError(BookcaseError):
    """Anything not classified above"""
    status_code = 500


__all__ = [
    'BookcaseError',
    'BadRequest',
    'NotFound',
    'NotUnique',
    'InternalServerError',
]
