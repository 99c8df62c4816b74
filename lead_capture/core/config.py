from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


DEFAULT_FALLBACK_PHOTO_URL = (
    "https://media.istockphoto.com/id/1337144146/vector/default-avatar-profile-icon-vector.jpg"
    "?s=612x612&w=0&k=20&c=BIbFwuv7FxTWvh5S3vB6bkT0Qv8Vn8N5Ffseq84ClGI="
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "lead-capture-api"
    environment: str = Field(default="dev", validation_alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # API
    api_prefix: str = Field(default="/api", validation_alias="API_PREFIX")

    # ActiveCampaign
    active_campaign_api_url: Optional[str] = Field(default=None, validation_alias="ACTIVE_CAMPAIGN_API_URL")
    active_campaign_api_token: Optional[str] = Field(default=None, validation_alias="ACTIVE_CAMPAIGN_API_TOKEN")
    active_campaign_tag_id: Optional[str] = Field(default=None, validation_alias="ACTIVE_CAMPAIGN_TAG_ID")
    # None means the CRM calls wait indefinitely
    active_campaign_timeout_seconds: Optional[float] = Field(
        default=None, validation_alias="ACTIVE_CAMPAIGN_TIMEOUT_SECONDS"
    )

    # RapidAPI / WhatsApp profile picture lookup
    rapidapi_key: Optional[str] = Field(default=None, validation_alias="RAPIDAPI_KEY")
    rapidapi_photo_host: str = Field(
        default="whatsapp-profile-picture-api.p.rapidapi.com", validation_alias="RAPIDAPI_PHOTO_HOST"
    )
    whatsapp_photo_timeout_seconds: float = Field(default=10.0, validation_alias="WHATSAPP_PHOTO_TIMEOUT_SECONDS")
    whatsapp_fallback_photo_url: str = Field(
        default=DEFAULT_FALLBACK_PHOTO_URL, validation_alias="WHATSAPP_FALLBACK_PHOTO_URL"
    )


settings = Settings()  # type: ignore
