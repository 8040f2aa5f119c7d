from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    overcharge_ratio: float = Field(default=1.5, gt=0)
    known_shell_companies: list[str] = Field(
        default_factory=lambda: ["known_shell_company1", "known_shell_company2"]
    )
    known_vendors: list[str] = Field(default_factory=list)

    market_price_source: str = "static"
    market_prices: dict[str, float] = Field(default_factory=dict)
    market_price_url: str = ""
    market_price_timeout_seconds: int = 10
