from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseEnvironment(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")


class Environment(BaseEnvironment):
    database_url: str = "sqlite+pysqlite:///persons.sqlite3"
    database_echo: bool = False
    log_level: str = "INFO"
    # the browser client is served from its own dev server
    cors_origins: list[str] = ["http://localhost:3000"]
    host: str = "127.0.0.1"
    port: int = 8080


@lru_cache
def get_environment() -> Environment:
    return Environment()
