"""Error types surfaced to clients as plain-text HTTP responses.

Each error maps to exactly one status code and one fixed body.
"""

from starlette import status


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad Request"


class UnauthorizedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class RecipeNotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Recipe ID not found."
