from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # External transaction ledger
    ledger_api_base: str = "http://localhost:8080"
    ledger_api_token: str = ""
    ledger_page_size: int = 20

    # HTTP client
    http_timeout_seconds: float = 10.0

    # Preferences store
    preferences_db_path: str = "data/preferences.db"

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
