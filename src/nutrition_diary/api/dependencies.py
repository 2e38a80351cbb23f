"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, Request

from nutrition_diary.containers import AppContainer
from nutrition_diary.domain.errors import DiaryError

_BEARER_PREFIX = "Bearer "


class BadRequestError(DiaryError):
    """Request could not be interpreted."""


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


async def require_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> str:
    """Resolve the caller's user id from a bearer token."""
    token = None
    if authorization and authorization.startswith(_BEARER_PREFIX):
        token = authorization[len(_BEARER_PREFIX) :].strip()
    return container.auth_service.authenticate(token)


async def read_json_object(request: Request) -> dict[str, object]:
    """Parse the request body as a JSON object."""
    # ValueError also covers integer literals past the int digit limit.
    try:
        payload = await request.json()
    except ValueError as exc:
        raise BadRequestError("Request body must be a JSON object.") from exc
    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object.")
    return payload
