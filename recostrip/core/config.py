from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Widget settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_MAX_CONNECTIONS: int = 20
    # Favorites and catalog records live under this prefix
    REDIS_KEY_PREFIX: str = "recostrip"

    CATALOG_URL: str = (
        "https://gist.githubusercontent.com/sevindi/5765c5812bbc8238a38b3cf52f233651/raw/"
        "56261d81af8561bf0a7cf692fe572f9e1e91f372/products.json"
    )
    CATALOG_FETCH_TIMEOUT: float = 10.0
    CATALOG_FETCH_RETRIES: int = 1  # single remote fetch

    # Layout (px)
    CARD_WIDTH: int = 240
    CARD_MARGIN: int = 20
    CHROME_PADDING: int = 80
    NARROW_VIEWPORT_MAX: int = 480
    CONTAINER_MAX_WIDTH: int = 1200

    WIDGET_TITLE: str = "You Might Also Like"
    CURRENCY_LABEL: str = "TRY"
    PRICE_THOUSANDS_SEPARATOR: str = "."
    PRICE_DECIMAL_SEPARATOR: str = ","


settings = Settings()
