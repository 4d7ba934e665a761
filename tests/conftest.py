import os

TEST_ENVIRONMENT = {
    "ENVIRONMENT": "production",
    "APPWRITE_ENDPOINT": "https://appwrite.test/v1",
    "APPWRITE_PROJECT_ID": "test-project",
    "APPWRITE_API_KEY": "test-api-key",
    "DATABASE_ID": "test-database",
    "PATIENT_COLLECTION_ID": "patients",
    "DOCTOR_COLLECTION_ID": "doctors",
    "APPOINTMENT_COLLECTION_ID": "appointments",
    "BUCKET_ID": "documents",
    "ADMIN_PASSKEY": "111111",
}

os.environ.update(TEST_ENVIRONMENT)

import pytest  # noqa: E402
from appwrite.exception import AppwriteException  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from patient_api.appwrite_client import get_appwrite_client  # noqa: E402
from patient_api.main import app  # noqa: E402


class FakeAppwriteClient:
    """In-memory stand-in for AppwriteClient."""

    def __init__(self):
        self.users = {}
        self.patients = {}
        self.appointments = []
        self.errors = {}
        self.listed_appointments_for = []

    def fail(self, operation: str, error: AppwriteException):
        self.errors[operation] = error

    def _raise_if_failing(self, operation):
        if operation in self.errors:
            raise self.errors[operation]

    def _next_id(self, prefix):
        return f"{prefix}-{len(self.users) + len(self.patients) + 1}"

    def get_user(self, user_id):
        self._raise_if_failing("get_user")
        if user_id not in self.users:
            raise AppwriteException("User with the requested ID could not be found.",
                                    404, "user_not_found")
        return self.users[user_id]

    def list_users_by_email(self, email):
        self._raise_if_failing("list_users_by_email")
        found = [user for user in self.users.values() if user["email"] == email]
        return len(found), found

    def create_user(self, *, email, phone, name):
        self._raise_if_failing("create_user")
        user_id = self._next_id("user")
        self.users[user_id] = {
            "$id": user_id, "email": email, "phone": phone or "", "name": name,
        }
        return self.users[user_id]

    def get_patient_by_user_id(self, user_id):
        self._raise_if_failing("get_patient_by_user_id")
        for patient in self.patients.values():
            if patient["userId"] == user_id:
                return patient
        return None

    def create_patient(self, data):
        self._raise_if_failing("create_patient")
        patient_id = self._next_id("patient")
        self.patients[patient_id] = {"$id": patient_id, **data}
        return self.patients[patient_id]

    def upload_identification_document(self, patient_id, *, filename, content,
                                       content_type=None):
        self._raise_if_failing("upload_identification_document")
        patient = self.patients[patient_id]
        patient["identificationDocumentId"] = f"file-{filename}"
        patient["identificationDocumentUrl"] = (
            f"https://appwrite.test/v1/storage/buckets/documents/files/"
            f"file-{filename}/view?project=test-project"
        )
        return patient

    def list_appointments(self, user_id=None):
        self._raise_if_failing("list_appointments")
        self.listed_appointments_for.append(user_id)
        if user_id:
            return [a for a in self.appointments if a["userId"] == user_id]
        return sorted(self.appointments, key=lambda a: a["$createdAt"], reverse=True)


@pytest.fixture
def appwrite():
    return FakeAppwriteClient()


@pytest.fixture
def client(appwrite):
    app.dependency_overrides[get_appwrite_client] = lambda: appwrite

    yield TestClient(app)

    app.dependency_overrides.clear()
