from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_DIRECT_MODEL: str = "gpt-4o"
    OPENAI_TEMPERATURE: float = 0.7
    OPENAI_MAX_TOKENS: int = 700
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"

    ROUTINE_PROXY_URL: str | None = None
    SEARCH_PROXY_URL: str | None = None

    SEARCH_BACKEND: str = "auto"  # "auto", "serpapi", "google", "llm", "none"
    SERPAPI_KEY: str | None = None
    GOOGLE_API_KEY: str | None = None
    GOOGLE_CX: str | None = None
    SEARCH_BRAND_HINT: str = "L'Oréal"

    CATALOG_PATH: str = "products.json"
    SELECTION_STORE_PATH: str = "./data/selection.json"

    HTTP_TIMEOUT_SECONDS: float | None = None

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


def load_settings() -> Settings:
    """Read settings fresh from the environment; client adapters call this per request."""
    return Settings()


settings = Settings()
