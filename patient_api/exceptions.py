from typing import Optional

from fastapi import HTTPException, status


class ResourceNotFoundHTTPException(HTTPException):
    def __init__(self, detail: str = 'Requested resource was not found on the server'):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ServiceHTTPException(HTTPException):
    """
    Error whose response body is sent as is instead of under "detail".

    `cause` is the fault that triggered it, exposed in the response only in
    development mode.
    """

    def __init__(self, body: dict,
                 status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
                 cause: Optional[BaseException] = None):
        super().__init__(status_code=status_code, detail=body)
        self.body = body
        self.cause = cause


class UpstreamServiceHTTPException(ServiceHTTPException):
    def __init__(self, error: str, cause: Optional[BaseException] = None):
        super().__init__({"error": error}, cause=cause)


class InvalidUserDataHTTPException(ServiceHTTPException):
    def __init__(self, errors: list[str], cause: Optional[BaseException] = None):
        super().__init__(
            {"message": "Invalid user data", "errors": errors},
            status_code=status.HTTP_400_BAD_REQUEST,
            cause=cause,
        )


class UserConflictHTTPException(ServiceHTTPException):
    def __init__(self, field: str, cause: Optional[BaseException] = None):
        super().__init__(
            {"message": "User already exists", "field": field},
            status_code=status.HTTP_409_CONFLICT,
            cause=cause,
        )


class UserCreationHTTPException(ServiceHTTPException):
    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(
            {"message": "Server error during user creation"}, cause=cause
        )


class MalformedAccessKeyHTTPException(ServiceHTTPException):
    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(
            {"error": "An error occurred while verifying the access key"},
            cause=cause,
        )
