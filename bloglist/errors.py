"""
Error taxonomy shared by the route handlers and the error translator.
Each error knows the status code and message it is answered with.
"""


class BloglistError(Exception):
    status_code = 500
    message = 'internal server error'

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(BloglistError):
    status_code = 404
    message = 'not found'


class ValidationError(BloglistError):
    status_code = 400
    message = 'validation failed'


class CastError(BloglistError):
    status_code = 400
    message = 'incorrect id'


class TokenInvalidError(BloglistError):
    """Missing, malformed or foreign token, or a user that does not own the record."""
    status_code = 401
    message = 'token invalid'


class TokenExpiredError(BloglistError):
    status_code = 401
    message = 'token expired'


class CredentialsError(BloglistError):
    status_code = 401
    message = 'invalid username or password'
