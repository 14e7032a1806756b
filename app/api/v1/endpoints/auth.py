"""
Authentication endpoints

Credentials are forwarded to the backend as-is; this service keeps no
session of its own.
"""

from typing import Any
from fastapi import APIRouter, Depends, status

from app.api.deps import get_app_state
from app.core.state import AppState
from app.schemas.response import SuccessResponse
from app.schemas.user import UserLogin, UserRegister

router = APIRouter()


@router.post("/register", response_model=SuccessResponse[Any], status_code=status.HTTP_201_CREATED)
async def register(user_data: UserRegister, state: AppState = Depends(get_app_state)) -> Any:
    data = await state.backend.register(
        email=user_data.email,
        password=user_data.password,
        nickname=user_data.nickname
    )
    return SuccessResponse(data=data, message="Registered")


@router.post("/login", response_model=SuccessResponse[Any])
async def login(credentials: UserLogin, state: AppState = Depends(get_app_state)) -> Any:
    data = await state.backend.login(email=credentials.email, password=credentials.password)
    return SuccessResponse(data=data, message="Login successful")
