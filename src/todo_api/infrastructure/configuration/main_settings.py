from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App Config
    app_name: str = "Todo API"
    app_env: str = "local"
    log_level: str = "INFO"
    log_format: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    api_prefix: str = ""

    # Observability
    tracing_enabled: bool = False

    model_config = SettingsConfigDict(env_file=None, extra="ignore")
