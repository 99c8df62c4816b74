import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from lead_capture.models.schemas import (
    ErrorResponse,
    PhotoErrorResponse,
    PhotoResponse,
    SubscribeResponse,
    fallback_photo,
)
from lead_capture.integrations.activecampaign_client import ActiveCampaignClient, ActiveCampaignConfigError
from lead_capture.integrations.whatsapp_photo_client import (
    WhatsAppPhotoClient,
    WhatsAppPhotoConfigError,
    normalize_phone,
)

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post(
    "/subscribe",
    response_model=SubscribeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def subscribe(request: Request):
    # Presence is the only check; values are forwarded as text
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}
    email = body.get("userEmail")
    phone = body.get("phoneNumber")

    if not email or not phone:
        return JSONResponse(
            ErrorResponse(error="Email and phone are required").model_dump(),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        client = ActiveCampaignClient()
    except ActiveCampaignConfigError:
        logger.error("Missing ActiveCampaign environment variables")
        return JSONResponse(
            ErrorResponse(error="Server configuration error.").model_dump(),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    try:
        contact_id = await client.subscribe(str(email), str(phone))
    except Exception:
        # Detail stays in the logs; the caller only sees the generic message
        logger.exception("Error in subscribe route")
        return JSONResponse(
            ErrorResponse(error="Could not subscribe user.").model_dump(),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info("Subscribed contact %s", contact_id)
    return SubscribeResponse(success=True)


def _photo_response(payload: PhotoResponse) -> JSONResponse:
    return JSONResponse(payload.model_dump(), status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post(
    "/whatsapp-photo",
    response_model=PhotoResponse,
    responses={400: {"model": PhotoErrorResponse}},
)
async def whatsapp_photo(request: Request):
    # Any failure below degrades to the fallback avatar with a 200
    try:
        body = await request.json()
        if body is None:
            raise ValueError("Request body is null")
        phone = body.get("phone") if isinstance(body, dict) else None

        if not phone:
            return JSONResponse(
                PhotoErrorResponse(error="Número de telefone é obrigatório").model_dump(),
                status_code=status.HTTP_400_BAD_REQUEST,
                headers=CORS_HEADERS,
            )

        try:
            client = WhatsAppPhotoClient()
        except WhatsAppPhotoConfigError:
            logger.error("RAPIDAPI_KEY is not configured; returning fallback photo")
            return _photo_response(fallback_photo())

        number = normalize_phone(str(phone))
        photo_url = await client.get_profile_picture_url(number)
    except Exception:
        logger.exception("WhatsApp photo lookup failed")
        return _photo_response(fallback_photo())

    if not photo_url:
        return _photo_response(fallback_photo())
    return _photo_response(PhotoResponse(success=True, result=photo_url, is_photo_private=False))


@router.options("/whatsapp-photo")
async def whatsapp_photo_preflight():
    return Response(status_code=status.HTTP_200_OK, headers=PREFLIGHT_HEADERS)
