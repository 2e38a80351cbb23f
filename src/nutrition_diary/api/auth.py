"""Account registration and login endpoints."""

from fastapi import APIRouter, Depends, Request, status

from nutrition_diary.api.dependencies import get_container, read_json_object
from nutrition_diary.api.schemas import AuthResponse
from nutrition_diary.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: Request, container: AppContainer = Depends(get_container)
) -> AuthResponse:
    """Create an account and return an access token."""
    payload = await read_json_object(request)
    session = container.auth_service.register(
        payload.get("email"), payload.get("password")
    )
    return AuthResponse.from_session("User registered successfully.", session)


@router.post("/login")
async def login(
    request: Request, container: AppContainer = Depends(get_container)
) -> AuthResponse:
    """Exchange credentials for an access token."""
    payload = await read_json_object(request)
    session = container.auth_service.login(
        payload.get("email"), payload.get("password")
    )
    return AuthResponse.from_session("Login successful.", session)
