from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./storage/players-sqlite3.db"
    cache_ttl_seconds: int = 3600
    cache_max_size: int = 1024
    cors_origins: str = "*"
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 9000
    seed_on_startup: bool = True

    rate_limit_enabled: bool = True
    rate_limit_window_seconds: int = 60
    rate_limit_max_general: int = 100
    rate_limit_max_strict: int = 20

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
