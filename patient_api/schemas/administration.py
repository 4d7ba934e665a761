from pydantic import BaseModel


class AccessKeyVerification(BaseModel):
    user: str | None = None
