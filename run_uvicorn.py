import uvicorn

from patient_api.config import settings

if __name__ == "__main__":
    uvicorn.run("patient_api.main:app", port=settings.PORT, log_level="debug", reload=True)
