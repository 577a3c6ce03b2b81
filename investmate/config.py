from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    finnhub_base_url: str = "https://finnhub.io/api/v1"
    # Probed in order at call time; the first non-empty value wins.
    finnhub_api_key_env_vars: list[str] = [
        "FINNHUB_API_KEY",
        "FINNHUB_TOKEN",
        "VITE_FINNHUB_API_KEY",
    ]
    log_level: str = "INFO"

    model_config = {"env_prefix": ""}


settings = Settings()
