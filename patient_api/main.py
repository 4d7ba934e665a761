import datetime
import time
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .appwrite_client import AppwriteClient
from .config import settings
from .exceptions import ServiceHTTPException
from .loggers import access_logger, app_logger
from .routers import administration, patients, users

app = FastAPI(
    docs_url=settings.BASE_URL + "/docs",
    redoc_url=settings.BASE_URL + "/redoc",
    openapi_url=settings.BASE_URL + "/openapi.json",
    title=settings.API_TITLE,
    version=settings.API_VERSION,
)

app.include_router(patients.router)
app.include_router(users.router)
app.include_router(administration.router)

ALLOWED_ORIGINS = [
    settings.FRONTEND_URL,
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        log_access(request, status.HTTP_500_INTERNAL_SERVER_ERROR, start)
        raise

    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)

    log_access(request, response.status_code, start)

    return response


def log_access(request: Request, status_code: int, start: float) -> None:
    elapsed_ms = (time.perf_counter() - start) * 1000
    access_logger.info(f"{request.method} {request.url.path} "
                       f"{status_code} {elapsed_ms:.3f} ms")


def format_stack(error: BaseException) -> str:
    return "".join(traceback.format_exception(error))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request,
                                       exc: RequestValidationError):
    if request.url.path != settings.BASE_URL + "/create-user":
        return await request_validation_exception_handler(request, exc)

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    app_logger.warning(f"Invalid user data: {errors}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid user data", "errors": errors},
    )


@app.exception_handler(ServiceHTTPException)
async def service_exception_handler(request: Request, exc: ServiceHTTPException):
    content = dict(exc.body)

    if settings.development_mode and exc.cause is not None:
        content["upstreamError"] = str(exc.cause)
        content["stack"] = format_stack(exc.cause)

    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    app_logger.exception(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}"
    )

    content = {"message": "An unexpected error occurred"}
    if settings.development_mode:
        content["stack"] = format_stack(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
        headers=SECURITY_HEADERS,
    )


@app.on_event("startup")
def startup():
    app_logger.info("Application is in startup")

    app.state.appwrite_client = AppwriteClient(settings)


@app.on_event("shutdown")
def shutdown():
    app_logger.info("Application is shutting down")

    app.state.appwrite_client.close()


@app.get(settings.BASE_URL + "/", tags=["Health"])
def health_check():
    return {
        "message": "Server is running",
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }
