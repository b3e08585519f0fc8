from pydantic_settings import BaseSettings
from pydantic import EmailStr
from typing import List, Optional

class Settings(BaseSettings):
    # 1️⃣ App
    APP_TITLE: str = "Portfolio Contact Backend"
    LOG_LEVEL: str = "INFO"

    # 2️⃣ Static portfolio site
    STATIC_DIR: str = "public"

    # 3️⃣ Contact form responses
    CONTACT_SUCCESS_MESSAGE: str = "Thank you for your message! I'll get back to you soon."
    CONTACT_INVALID_MESSAGE: str = "Please check your form data"
    CONTACT_FAILURE_MESSAGE: str = "Something went wrong. Please try again later."

    # 4️⃣ Email config (owner notification, off unless enabled)
    CONTACT_NOTIFY_ENABLED: bool = False
    OWNER_EMAIL: Optional[EmailStr] = None
    MAIL_USERNAME: str = ""
    MAIL_PASSWORD: str = ""
    MAIL_FROM: Optional[EmailStr] = None
    MAIL_PORT: int = 587
    MAIL_SERVER: str = ""
    MAIL_FROM_NAME: str = "Portfolio"
    MAIL_STARTTLS: bool = True
    MAIL_SSL_TLS: bool = False
    USE_CREDENTIALS: bool = True

    # frontend origins
    FRONTEND_ORIGINS: List[str] = [
        "http://localhost:5000",
        "http://127.0.0.1:5000",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def notifications_configured(self) -> bool:
        return bool(
            self.CONTACT_NOTIFY_ENABLED
            and self.OWNER_EMAIL
            and self.MAIL_FROM
            and self.MAIL_SERVER
        )

settings = Settings()
