"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrition_diary.api.auth import router as auth_router
from nutrition_diary.api.dependencies import BadRequestError
from nutrition_diary.api.foods import router as foods_router
from nutrition_diary.api.meals import router as meals_router
from nutrition_diary.app_logging import configure_logging
from nutrition_diary.containers import AppContainer
from nutrition_diary.domain.errors import (
    DiaryError,
    EmailAlreadyRegisteredError,
    InvalidAuthInputError,
    InvalidCredentialsError,
    MealStoreError,
    MealValidationError,
    UnauthorizedError,
)

_STATUS_BY_ERROR: dict[type[DiaryError], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    MealValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidAuthInputError: status.HTTP_400_BAD_REQUEST,
    BadRequestError: status.HTTP_400_BAD_REQUEST,
    EmailAlreadyRegisteredError: status.HTTP_409_CONFLICT,
    MealStoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrition Diary")
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(foods_router)
    app.include_router(meals_router)

    @app.exception_handler(DiaryError)
    async def diary_error_handler(request: Request, exc: DiaryError) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            return JSONResponse(
                status_code=status_code, content={"error": INTERNAL_ERROR_MESSAGE}
            )
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: DiaryError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST
