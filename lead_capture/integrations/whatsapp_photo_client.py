import asyncio
import logging
import re
from typing import Optional

import requests

from lead_capture.core.config import settings

logger = logging.getLogger(__name__)

COUNTRY_PREFIX = "55"
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def normalize_phone(phone: str) -> str:
    """Keep digits only and prefix the Brazilian country code on full-length numbers.

    Numbers shorter than 11 digits are returned as cleaned, without the prefix.
    """
    clean = _NON_DIGIT_RE.sub("", phone)
    if not clean.startswith(COUNTRY_PREFIX) and len(clean) >= 11:
        return COUNTRY_PREFIX + clean
    return clean


class WhatsAppPhotoConfigError(RuntimeError):
    pass


class WhatsAppPhotoClient:
    """RapidAPI WhatsApp profile picture lookup."""

    def __init__(self,
                 api_key: Optional[str] = None,
                 host: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.api_key = api_key or settings.rapidapi_key
        self.host = host or settings.rapidapi_photo_host
        self.timeout = timeout if timeout is not None else settings.whatsapp_photo_timeout_seconds
        if not self.api_key:
            raise WhatsAppPhotoConfigError("RAPIDAPI_KEY must be set")

    def get_profile_picture_url_sync(self, number: str) -> Optional[str]:
        """Return the photo URL, or None when the API reports no (public) photo.

        Raises requests exceptions on timeouts and non-success responses.
        """
        url = f"https://{self.host}/user-profile-picture"
        headers = {"x-rapidapi-key": self.api_key, "x-rapidapi-host": self.host}
        resp = requests.get(url, headers=headers, params={"number": number}, timeout=self.timeout)
        try:
            resp.raise_for_status()
        except requests.HTTPError:
            logger.error("RapidAPI returned status: %s", resp.status_code)
            raise
        data = resp.json()
        if not isinstance(data, dict) or data.get("exists") is not True:
            return None
        return data.get("profile_picture_url") or None

    async def get_profile_picture_url(self, number: str) -> Optional[str]:
        """Async lookup bounded by ``timeout`` end to end.

        The requests timeout only covers connect and each socket read, so a
        slow-trickling body is cut off here with ``asyncio.TimeoutError``.
        """
        return await asyncio.wait_for(
            asyncio.to_thread(self.get_profile_picture_url_sync, number), self.timeout
        )
