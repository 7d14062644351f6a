"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.auth import TokenClaims, claims_from_token
from src.services.list_service import ListService
from src.services.settings_service import SettingsService
from src.services.task_service import TaskService
from src.services.user_service import UserService

# Missing or non-bearer headers are reported by get_current_claims as 401
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_claims(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Verify the bearer token and expose its claims to the request.

    The user row is not loaded here; services check that the user still
    exists before acting.
    """
    if credentials is None:
        raise _unauthorized("Unauthorized")

    claims = claims_from_token(credentials.credentials)
    if claims is None:
        raise _unauthorized("Invalid token")

    request.state.user = claims
    return claims


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_task_service(
    db: Annotated[Session, Depends(get_db)],
) -> TaskService:
    """Get task service with dependencies."""
    return TaskService(db)


def get_list_service(
    db: Annotated[Session, Depends(get_db)],
) -> ListService:
    """Get list service with dependencies."""
    return ListService(db)


def get_settings_service(
    db: Annotated[Session, Depends(get_db)],
) -> SettingsService:
    """Get settings service with dependencies."""
    return SettingsService(db)


CurrentClaims = Annotated[TokenClaims, Depends(get_current_claims)]
