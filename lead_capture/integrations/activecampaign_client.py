import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from lead_capture.core.config import settings

logger = logging.getLogger(__name__)


class ActiveCampaignConfigError(RuntimeError):
    pass


class ActiveCampaignError(Exception):
    """A CRM call returned a non-success response or an unusable body."""

    def __init__(self, step: str, status_code: Optional[int] = None, detail: Any = None):
        self.step = step
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"ActiveCampaign ({step}) failed: {status_code} {detail}")


class ActiveCampaignClient:
    """Minimal ActiveCampaign v3 client: create a contact and tag it.

    Blocking requests; the async methods offload to a thread.
    """

    ACTIVE_STATUS = 1

    def __init__(self,
                 api_url: Optional[str] = None,
                 api_token: Optional[str] = None,
                 tag_id: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.api_url = (api_url or settings.active_campaign_api_url or "").rstrip("/")
        self.api_token = api_token or settings.active_campaign_api_token
        self.tag_id = tag_id or settings.active_campaign_tag_id
        self.timeout = timeout if timeout is not None else settings.active_campaign_timeout_seconds
        if not self.api_url or not self.api_token or not self.tag_id:
            raise ActiveCampaignConfigError(
                "ACTIVE_CAMPAIGN_API_URL, ACTIVE_CAMPAIGN_API_TOKEN and ACTIVE_CAMPAIGN_TAG_ID must be set"
            )

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", "Api-Token": self.api_token}  # type: ignore[dict-item]

    def _post(self, step: str, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        resp = requests.post(f"{self.api_url}{path}", json=body, headers=self._headers(), timeout=self.timeout)
        if not resp.ok:
            try:
                detail = resp.json()
            except ValueError:
                detail = resp.text
            logger.error("ActiveCampaign (%s) Error: %s %s", step, resp.status_code, detail)
            raise ActiveCampaignError(step, resp.status_code, detail)
        return resp.json()

    # --- sync implementations (run in thread) ---
    def create_contact_sync(self, email: str, phone: str) -> str:
        data = self._post(
            "Create Contact",
            "/api/3/contacts",
            {"contact": {"email": email, "phone": phone, "status": self.ACTIVE_STATUS}},
        )
        contact_id = (data.get("contact") or {}).get("id") if isinstance(data, dict) else None
        if contact_id in (None, ""):
            logger.error("ActiveCampaign (Create Contact) response has no contact id: %s", data)
            raise ActiveCampaignError("Create Contact", detail="missing contact id")
        return str(contact_id)

    def add_tag_sync(self, contact_id: str) -> None:
        self._post(
            "Add Tag",
            "/api/3/contactTags",
            {"contactTag": {"contact": contact_id, "tag": self.tag_id}},
        )

    def subscribe_sync(self, email: str, phone: str) -> str:
        # No rollback: if tagging fails the contact stays created untagged
        contact_id = self.create_contact_sync(email, phone)
        self.add_tag_sync(contact_id)
        return contact_id

    # --- async API ---
    async def subscribe(self, email: str, phone: str) -> str:
        return await asyncio.to_thread(self.subscribe_sync, email, phone)
