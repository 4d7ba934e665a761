from pydantic import BaseModel, ConfigDict, Field


class RegisterPatient(BaseModel):
    user_id: str = Field(alias="userId", min_length=1)
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class IdentificationDocument(BaseModel):
    identification_document_id: str = Field(alias="identificationDocumentId")
    identification_document_url: str = Field(alias="identificationDocumentUrl")
    model_config = ConfigDict(populate_by_name=True)
