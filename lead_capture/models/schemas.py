from pydantic import BaseModel

from lead_capture.core.config import settings


class SubscribeResponse(BaseModel):
    success: bool


class ErrorResponse(BaseModel):
    error: str


class PhotoResponse(BaseModel):
    success: bool
    result: str
    is_photo_private: bool


class PhotoErrorResponse(BaseModel):
    success: bool = False
    error: str


def fallback_photo() -> PhotoResponse:
    """Default avatar returned whenever a real photo can't be determined."""
    return PhotoResponse(success=True, result=settings.whatsapp_fallback_photo_url, is_photo_private=True)
