from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from swivel_mfa.domain.entities import SwivelConfig


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"

    # Swivel server
    swivel_url: str = ""
    swivel_shared_secret: SecretStr = SecretStr("")
    swivel_ignore_ssl_errors: bool = False
    swivel_agent_path: str = "/AgentXML"

    # Timeouts
    swivel_timeout_seconds: float = 10.0
    swivel_ping_timeout_seconds: float = 5.0

    # Upstream primary authentication
    principal_header: str = "X-Authenticated-Principal"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    def swivel_config(self) -> SwivelConfig:
        return SwivelConfig(
            swivel_url=self.swivel_url,
            shared_secret=self.swivel_shared_secret.get_secret_value(),
            ignore_ssl_errors=self.swivel_ignore_ssl_errors,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
