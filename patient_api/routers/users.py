from appwrite.exception import AppwriteException
from fastapi import APIRouter, Depends, status

from ..appwrite_client import AppwriteClient, get_appwrite_client
from ..config import settings
from ..exceptions import (
    InvalidUserDataHTTPException,
    UserConflictHTTPException,
    UserCreationHTTPException,
)
from ..loggers import app_logger
from ..schemas.user import CreateUser, ReturnCreatedUser

router = APIRouter(prefix=settings.BASE_URL, tags=["Users"])

CONFLICTING_FIELDS = {
    "user_email_already_exists": "email",
    "user_phone_already_exists": "phone",
    "user_already_exists": "userId",
}


def translate_user_creation_error(error: AppwriteException):
    match error.code:
        case status.HTTP_400_BAD_REQUEST:
            return InvalidUserDataHTTPException([error.message], cause=error)
        case status.HTTP_409_CONFLICT:
            field = CONFLICTING_FIELDS.get(error.type, "email")
            return UserConflictHTTPException(field, cause=error)
        case _:
            return UserCreationHTTPException(cause=error)


@router.post("/create-user", response_model=ReturnCreatedUser)
def create_user(
        user: CreateUser, appwrite: AppwriteClient = Depends(get_appwrite_client)
):
    """
    Registers a user account, unless one with the same email already exists.

    `isMember` tells whether the returned user was already registered.
    """
    try:
        total, existing_users = appwrite.list_users_by_email(user.email)

        if total:
            return {
                "message": "User already exists",
                "newUser": existing_users[0],
                "isMember": True,
            }

        new_user = appwrite.create_user(
            email=user.email, phone=user.phone, name=user.name
        )
    except AppwriteException as e:
        app_logger.error(f"User creation error: {e}")
        raise translate_user_creation_error(e)

    app_logger.info(f"Registered user {new_user.get('$id')}")

    return {
        "message": "User registered successfully",
        "newUser": new_user,
        "isMember": False,
    }
