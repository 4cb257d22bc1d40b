from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URL = 'http://www.omdbapi.com/'


class Settings(BaseSettings):
    OMDB_API_KEY: str = ''
    OMDB_BASE_URL: str = DEFAULT_URL
    OMDB_TIMEOUT: float = 10.0
    OMDB_STRICT_KINDS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )


settings = Settings()
