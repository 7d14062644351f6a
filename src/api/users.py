"""User and authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import CurrentClaims, get_user_service
from src.schemas.auth import (
    AuthResponse,
    UserEnvelope,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from src.services.auth import create_access_token
from src.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user and log them in."""
    user = users.create(
        email=user_data.email,
        password=user_data.password,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        profile_image=user_data.profile_image,
    )

    token = create_access_token(user.id, user.email)

    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Login with email and password."""
    user = users.authenticate(credentials.email, credentials.password)

    if not user:
        logger.warning("Rejected login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token(user.id, user.email)

    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=UserEnvelope)
def get_me(
    claims: CurrentClaims,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    user = users.require(claims.user_id)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.api_route("/me", methods=["PUT", "PATCH"], response_model=UserEnvelope)
def update_me(
    user_data: UserUpdate,
    claims: CurrentClaims,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user. Only supplied fields change."""
    user = users.update(claims.user_id, user_data.patch())
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_me(
    claims: CurrentClaims,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Delete the current user with all their tasks, lists and settings."""
    users.delete(claims.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
