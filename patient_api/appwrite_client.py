from typing import Any

from appwrite.client import Client
from appwrite.id import ID
from appwrite.input_file import InputFile
from appwrite.query import Query
from appwrite.services.databases import Databases
from appwrite.services.storage import Storage
from appwrite.services.users import Users
from fastapi import Request

from .config import Settings
from .loggers import app_logger


class AppwriteClient:
    """
    Settings-bound access to the Appwrite services used by the API.

    Every method forwards its arguments to the SDK unchanged and returns the
    plain JSON data of the response. Faults raised by the SDK
    (`AppwriteException`) are left to the caller.
    """

    def __init__(self, config: Settings, client: Client | None = None):
        self.config = config

        if client is None:
            client = Client()
            client.set_endpoint(config.APPWRITE_ENDPOINT)
            client.set_project(config.APPWRITE_PROJECT_ID)
            client.set_key(config.APPWRITE_API_KEY)

        self.client = client
        self.databases = Databases(client)
        self.users = Users(client)
        self.storage = Storage(client)

    def close(self) -> None:
        """The SDK keeps no open connections, dropping the services is enough."""
        self.client = None
        self.databases = None
        self.users = None
        self.storage = None

    # Users

    def get_user(self, user_id: str) -> dict[str, Any]:
        return self.users.get(user_id)

    def list_users_by_email(self, email: str) -> tuple[int, list[dict[str, Any]]]:
        result = self.users.list(queries=[Query.equal("email", [email])])
        return result["total"], result["users"]

    def create_user(self, *, email: str, phone: str | None,
                    name: str) -> dict[str, Any]:
        return self.users.create(
            ID.unique(), email=email, phone=phone, password=None, name=name
        )

    # Patients

    def get_patient_by_user_id(self, user_id: str) -> dict[str, Any] | None:
        result = self.databases.list_documents(
            self.config.DATABASE_ID,
            self.config.PATIENT_COLLECTION_ID,
            queries=[Query.equal("userId", [user_id])],
        )
        documents = result["documents"]

        return documents[0] if documents else None

    def create_patient(self, data: dict[str, Any]) -> dict[str, Any]:
        return self.databases.create_document(
            self.config.DATABASE_ID,
            self.config.PATIENT_COLLECTION_ID,
            ID.unique(),
            data,
        )

    def get_file_view_url(self, file_id: str) -> str:
        return (
            f"{self.config.APPWRITE_ENDPOINT}/storage/buckets/"
            f"{self.config.BUCKET_ID}/files/{file_id}/view"
            f"?project={self.config.APPWRITE_PROJECT_ID}"
        )

    def upload_identification_document(
            self,
            patient_id: str,
            *,
            filename: str,
            content: bytes,
            content_type: str | None = None,
    ) -> dict[str, Any]:
        uploaded_file = self.storage.create_file(
            self.config.BUCKET_ID,
            ID.unique(),
            InputFile.from_bytes(content, filename, content_type),
        )
        file_id = uploaded_file["$id"]

        app_logger.info(f"Stored identification document {file_id} "
                        f"for patient {patient_id}")

        return self.databases.update_document(
            self.config.DATABASE_ID,
            self.config.PATIENT_COLLECTION_ID,
            patient_id,
            {
                "identificationDocumentId": file_id,
                "identificationDocumentUrl": self.get_file_view_url(file_id),
            },
        )

    # Appointments

    def list_appointments(self, user_id: str | None = None) -> list[dict[str, Any]]:
        if user_id:
            queries = [Query.equal("userId", [user_id])]
        else:
            queries = [Query.order_desc("$createdAt")]

        result = self.databases.list_documents(
            self.config.DATABASE_ID,
            self.config.APPOINTMENT_COLLECTION_ID,
            queries=queries,
        )

        return result["documents"]


def get_appwrite_client(request: Request) -> AppwriteClient:
    return request.app.state.appwrite_client
