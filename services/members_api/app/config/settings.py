from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    UPSTREAM_URL: str = "https://omusp.jp/members"
    UPSTREAM_HOST_PREFIX: str = "https://omusp.jp"
    UPSTREAM_TIMEOUT: float = 5.0
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()


def get_settings() -> Settings:
    return settings
