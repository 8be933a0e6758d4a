from fastapi import APIRouter, Depends, Request, Response, status

from jobgoblin.core.auth import AuthContext, require_user
from jobgoblin.core.config import settings
from jobgoblin.core.rate_limit import rate_limit
from jobgoblin.schemas.auth import (
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    SessionResponse,
    SignupRequest,
)
from jobgoblin.services import account_service

router = APIRouter()


@router.post("/auth/signup", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
@rate_limit(settings.auth_rate_limit)
def signup(request: Request, payload: SignupRequest):
    _ = request
    return account_service.register(payload)


@router.post("/auth/login", response_model=SessionResponse)
@rate_limit(settings.auth_rate_limit)
def login(request: Request, payload: LoginRequest):
    _ = request
    return account_service.login(payload)


@router.post("/auth/logout", response_model=MessageResponse)
def logout(response: Response, auth: AuthContext = Depends(require_user)):
    response.headers.update(auth.session_headers())
    account_service.logout(auth.token)
    return MessageResponse(message="Logged out successfully")


@router.get("/auth/profile", response_model=ProfileResponse)
def profile(response: Response, auth: AuthContext = Depends(require_user)):
    response.headers.update(auth.session_headers())
    return ProfileResponse(user=auth.user)
