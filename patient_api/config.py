from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App config
    API_VERSION: str = "1.0.0"
    API_TITLE: str = "Patient Portal API"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app.log"
    ERROR_LOG_FILE: str = "app-error.log"
    ENVIRONMENT: str = "production"

    BASE_URL: str = ""
    FRONTEND_URL: str = "http://localhost:5173"
    PORT: int = 5000

    # Appwrite config
    APPWRITE_ENDPOINT: str
    APPWRITE_PROJECT_ID: str
    APPWRITE_API_KEY: str

    DATABASE_ID: str
    PATIENT_COLLECTION_ID: str
    DOCTOR_COLLECTION_ID: str
    APPOINTMENT_COLLECTION_ID: str
    BUCKET_ID: str

    # Admin gate
    ADMIN_PASSKEY: str = Field(min_length=1)

    model_config = SettingsConfigDict(env_file=(".env", ".env.local"))

    @property
    def development_mode(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


settings = Settings()
