from typing import Any

from appwrite.exception import AppwriteException
from fastapi import APIRouter, Depends, UploadFile

from ..appwrite_client import AppwriteClient, get_appwrite_client
from ..config import settings
from ..exceptions import ResourceNotFoundHTTPException, UpstreamServiceHTTPException
from ..loggers import app_logger
from ..schemas.patient import IdentificationDocument, RegisterPatient

router = APIRouter(prefix=settings.BASE_URL + "/patient", tags=["Patients"])


@router.get("/by-user/{user_id}")
def get_user(
        user_id: str, appwrite: AppwriteClient = Depends(get_appwrite_client)
) -> dict[str, Any]:
    try:
        return appwrite.get_user(user_id)
    except AppwriteException as e:
        app_logger.error(f"Fetching user {user_id} failed: {e}")
        raise UpstreamServiceHTTPException(
            "An error occurred while fetching the user", cause=e
        )


@router.get("/by-patient/{user_id}")
def get_patient(
        user_id: str, appwrite: AppwriteClient = Depends(get_appwrite_client)
) -> dict[str, Any]:
    """
    Returns the patient record owned by the user with the given id.
    """
    try:
        patient = appwrite.get_patient_by_user_id(user_id)
    except AppwriteException as e:
        app_logger.error(f"Fetching patient of user {user_id} failed: {e}")
        raise UpstreamServiceHTTPException(
            "An error occurred while fetching the patient", cause=e
        )

    if patient is None:
        raise ResourceNotFoundHTTPException(
            detail=f"Patient of user with id of {user_id} was not found"
        )

    return patient


@router.post("/register")
def register_patient(
        patient: RegisterPatient,
        appwrite: AppwriteClient = Depends(get_appwrite_client),
) -> dict[str, Any]:
    patient_data = {
        "identificationDocumentId": "",
        "identificationDocumentUrl": "",
        **patient.model_dump(by_alias=True),
    }

    try:
        new_patient = appwrite.create_patient(patient_data)
    except AppwriteException as e:
        app_logger.error(f"Patient registration for user {patient.user_id} failed: {e}")
        raise UpstreamServiceHTTPException(
            "An error occurred while registering the patient", cause=e
        )

    app_logger.info(f"Registered patient {new_patient.get('$id')} "
                    f"for user {patient.user_id}")

    return new_patient


@router.post("/{patient_id}/identification-document",
             response_model=IdentificationDocument)
def upload_identification_document(
        patient_id: str,
        file: UploadFile,
        appwrite: AppwriteClient = Depends(get_appwrite_client),
):
    content = file.file.read()

    try:
        updated_patient = appwrite.upload_identification_document(
            patient_id,
            filename=file.filename or patient_id,
            content=content,
            content_type=file.content_type,
        )
    except AppwriteException as e:
        app_logger.error(f"Identification document upload for patient "
                         f"{patient_id} failed: {e}")
        raise UpstreamServiceHTTPException(
            "An error occurred while uploading the identification document",
            cause=e,
        )

    return updated_patient
