"""
Syncboard Client - Settings

Settings are loaded from environment variables with the SYNCBOARD_ prefix,
or from a .env file in the working directory.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from environment variables.

    The HTTP client reads ``WORKSPACE_ID`` and ``API_TOKEN`` on every request,
    so reassigning them at runtime takes effect on the next call.
    """

    model_config = SettingsConfigDict(
        env_prefix="SYNCBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Backend host, without the API version prefix
    API_HOST: str = "http://localhost:3000"

    # Tenant scoping identifier sent as the Workspace-Id header
    WORKSPACE_ID: str = ""

    # Bearer token sent in the Authorization header
    API_TOKEN: str = ""

    # Logging level
    LOG_LEVEL: str = "INFO"


settings = Settings()
