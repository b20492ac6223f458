from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Desktop browser UA; some sites serve stripped-down mobile pages otherwise.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_11_6) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/53.0.2785.143 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="LINK_PREVIEW_USER_AGENT")
    timeout_s: float = Field(default=10.0, gt=0, alias="LINK_PREVIEW_TIMEOUT_S")
    follow_redirects: bool = Field(default=True, alias="LINK_PREVIEW_FOLLOW_REDIRECTS")
    default_charset: str = Field(default="utf-8", alias="LINK_PREVIEW_DEFAULT_CHARSET")
    scan_chunk_size: int = Field(default=4096, gt=0, alias="LINK_PREVIEW_SCAN_CHUNK_SIZE")

    log_level: str = Field(default="INFO", alias="LINK_PREVIEW_LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LINK_PREVIEW_LOG_JSON")


def load_settings() -> Settings:
    return Settings()
