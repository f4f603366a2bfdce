# app/core/config.py
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "clinic-client-backend"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "*"

    # Firebase service account. Inline fields win over the JSON file; with
    # neither set, application default credentials are used.
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CLIENT_EMAIL: Optional[str] = None
    FIREBASE_PRIVATE_KEY: Optional[str] = None
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None
    FIREBASE_APP_NAME: str = "clinic-backend"

    # Login credentials use {mobile}@AUTH_EMAIL_DOMAIN as their email
    AUTH_EMAIL_DOMAIN: str = "nutricarewellness.in"

    CLIENTS_COLLECTION: str = "clients"
    OTP_COLLECTION: str = "temp_otp"
    OTP_EXPIRY_MINUTES: int = 5
    OTP_PUSH_TITLE: str = "NutriCare OTP Code"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
