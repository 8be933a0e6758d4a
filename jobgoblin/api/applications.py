from fastapi import APIRouter, Depends, Response, status

from jobgoblin.core.auth import AuthContext, require_user
from jobgoblin.schemas.applications import (
    ApplicationCreate,
    ApplicationCreateResponse,
    ApplicationListResponse,
)
from jobgoblin.services import application_service

router = APIRouter()


@router.get("/applications", response_model=ApplicationListResponse)
def list_applications(response: Response, auth: AuthContext = Depends(require_user)):
    response.headers.update(auth.session_headers())
    return ApplicationListResponse(applications=application_service.list_applications(auth.user.id))


@router.post("/applications", response_model=ApplicationCreateResponse, status_code=status.HTTP_201_CREATED)
def create_application(payload: ApplicationCreate, response: Response, auth: AuthContext = Depends(require_user)):
    response.headers.update(auth.session_headers())
    application = application_service.create_application(auth.user.id, payload)
    return ApplicationCreateResponse(message="Application created successfully", application=application)
