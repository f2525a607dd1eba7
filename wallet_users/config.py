from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite:///./wallet_users.db"
    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    allowed_origins: str = "http://localhost:3000"
    session_ttl_hours: int = 24
    cookie_name: str = "token"
    cookie_secure: bool = False
    # When false, 500 responses hide the underlying error message.
    expose_internal_errors: bool = True


settings = Settings()
