"""File upload API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status

from src.api.dependencies import get_current_user, get_upload_service
from src.schemas.auth import UserClaims
from src.schemas.upload import UploadResponse
from src.services.upload_service import UploadService

router = APIRouter(tags=["uploads"])


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
def upload_file(
    current_user: Annotated[UserClaims, Depends(get_current_user)],
    service: Annotated[UploadService, Depends(get_upload_service)],
    file: Annotated[UploadFile | None, File()] = None,
):
    """Upload a single JPEG, PNG or GIF image (multipart field ``file``)."""
    stored = service.save(file)
    return UploadResponse(filename=stored.filename, path=stored.path)
