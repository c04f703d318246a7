"""
Configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Before anything is read, ``.env.local`` and
then ``.env`` from the working directory are loaded with
``python-dotenv`` so that local development does not require exporting
variables by hand.  Values already present in the environment win.

Optional integrations degrade rather than fail: without e-mail
credentials contact notifications are skipped, and without a Gemini key
text generation answers with a fixed fallback string.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv(".env.local")
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Site Admin API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Hosted backend.  The service role key is used for every data store
    # call and for the identity admin API; the anon key is only used for
    # password sign-in and falls back to the service key when unset.
    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_service_key: str = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
    supabase_anon_key: str = os.getenv("SUPABASE_ANON_KEY", "")

    # Comma-separated list of origins allowed to call the API from a
    # browser.  Requests carrying any other Origin header are rejected.
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", "http://localhost:5173")

    # Outbound e-mail.  Absent credentials turn notifications into a no-op.
    email_user: str = os.getenv("EMAIL_USER", "")
    email_password: str = os.getenv("EMAIL_PASS", "")
    email_from_name: str = os.getenv("EMAIL_FROM_NAME", "Intravvel")
    admin_email: str = os.getenv("ADMIN_EMAIL", "")
    smtp_host: str = os.getenv("SMTP_HOST", "smtp.gmail.com")
    smtp_port: int = int(os.getenv("SMTP_PORT", "465"))

    gemini_api_key: str = os.getenv("GEMINI_API_KEY", "")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

    # Identity created by ``GET /admin-init`` when it does not exist yet.
    admin_init_email: str = os.getenv("ADMIN_INIT_EMAIL", "admin@intravvel.com")
    admin_init_password: str = os.getenv("ADMIN_INIT_PASSWORD", "admin123")

    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "15"))

    @property
    def allowed_origins_list(self) -> List[str]:
        return _split_csv(self.allowed_origins)

    @property
    def notification_recipient(self) -> str:
        return self.admin_email or self.email_user


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
