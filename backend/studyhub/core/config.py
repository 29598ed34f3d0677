from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # tokens are issued by the external identity provider, we only verify them
    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    DATABASE_URL: str = "sqlite:///./studyhub.db"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])


settings = Settings()
