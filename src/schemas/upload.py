"""Upload schemas."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Stored upload."""

    message: str = "File uploaded successfully"
    filename: str
    path: str
