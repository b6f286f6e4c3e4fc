"""12-factor configuration adapter using environment variables."""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ptv_departures.domain.models.credentials import Credentials


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Values are read from PTV_* environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PTV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials issued by PTV
    devid: str = Field(default="", description="Developer id issued by PTV")
    api_key: SecretStr = Field(
        default=SecretStr(""), description="Private key used to sign requests"
    )

    # PTV API configuration
    base_url: str = Field(
        default="https://timetableapi.ptv.vic.gov.au",
        description="Base URL of the PTV Timetable API",
    )
    timeout_seconds: float = Field(default=10.0, description="Timeout for API requests in seconds")
    max_departures: int = Field(
        default=10, description="Default departure limit per destination"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL uses https, since credentials travel in the query."""
        if not v.startswith("https://"):
            raise ValueError("base_url must start with 'https://'")
        return v.rstrip("/")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("timeout_seconds must be positive")
        return v

    def credentials(self) -> Credentials:
        """Build domain credentials.

        Raises:
            ValueError: If devid or api_key is not configured.
        """
        if not self.devid.strip():
            raise ValueError("PTV_DEVID must be set")
        if not self.api_key.get_secret_value():
            raise ValueError("PTV_API_KEY must be set")
        return Credentials(devid=self.devid.strip(), private_key=self.api_key.get_secret_value())
