from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="GRIDLEDGER_")

    app_name: str = "GridLedger"
    debug: bool = False

    log_level: str = "INFO"

    # Series filter applied by grids when the request does not set one
    default_max_series: int = 12

    # Upper bound accepted for a request's bonus percentage
    max_bonus_percentage: float = 100.0


settings = Settings()
