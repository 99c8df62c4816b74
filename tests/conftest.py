import json

import pytest
import requests
from fastapi.testclient import TestClient

from lead_capture.core.config import settings
from lead_capture.main import app


def make_response(status_code=200, payload=None, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    if payload is not None:
        resp._content = json.dumps(payload).encode("utf-8")
    else:
        resp._content = (text or "").encode("utf-8")
    return resp


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def ac_settings(monkeypatch):
    monkeypatch.setattr(settings, "active_campaign_api_url", "https://acme.api-us1.com/")
    monkeypatch.setattr(settings, "active_campaign_api_token", "ac-token")
    monkeypatch.setattr(settings, "active_campaign_tag_id", "7")
    monkeypatch.setattr(settings, "active_campaign_timeout_seconds", None)
    return settings


@pytest.fixture
def photo_settings(monkeypatch):
    monkeypatch.setattr(settings, "rapidapi_key", "rapid-key")
    monkeypatch.setattr(settings, "whatsapp_photo_timeout_seconds", 10.0)
    return settings
