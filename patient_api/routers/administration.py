from appwrite.exception import AppwriteException
from fastapi import APIRouter, Depends, Query

from ..appwrite_client import AppwriteClient, get_appwrite_client
from ..config import settings
from ..exceptions import MalformedAccessKeyHTTPException, UpstreamServiceHTTPException
from ..loggers import app_logger
from ..schemas.administration import AccessKeyVerification
from ..schemas.appointment import AppointmentStats
from ..utils import aggregate_appointments, decode_base64

router = APIRouter(prefix=settings.BASE_URL, tags=["Administration"])

APPROVED_USER = "gi"


@router.get("/api/{key:path}", response_model=AccessKeyVerification)
def verify_access_key(key: str):
    try:
        decoded_key = decode_base64(key)
    except ValueError as e:
        app_logger.warning(f"Malformed admin access key received: {e}")
        raise MalformedAccessKeyHTTPException(cause=e)

    if decoded_key != settings.ADMIN_PASSKEY.encode("utf-8"):
        app_logger.warning(f"Rejected admin access key {decoded_key!r}")
        return {"user": None}

    app_logger.info("========= APPROVED ADMIN ACCESS KEY =========")
    return {"user": APPROVED_USER}


@router.get("/admin", response_model=AppointmentStats)
def get_appointment_stats(
        user_id: str | None = Query(None, alias="userId"),
        appwrite: AppwriteClient = Depends(get_appwrite_client),
):
    try:
        appointments = appwrite.list_appointments(user_id)
    except AppwriteException as e:
        app_logger.error(f"Listing appointments failed: {e}")
        raise UpstreamServiceHTTPException(
            "An error occurred while fetching appointments", cause=e
        )

    return aggregate_appointments(appointments)
