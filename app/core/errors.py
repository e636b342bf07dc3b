from fastapi import status

UNAUTHORIZED_ERROR_MESSAGE = "It's necessary to login to see this content"
FORBIDDEN_ERROR_MESSAGE = "You don't have the permission to access this content"
NOT_FOUND_MESSAGE = "Page not found"
OBJECT_TYPE_MESSAGE = "The request must be a json object"
INTERNAL_ERROR_MESSAGE = "An error occurred, try again later"
RATE_LIMIT_MESSAGE = "You reached the limit of requests"


class ApiError(Exception):
    """Base class for errors that are returned to the client as {"err": message}."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
